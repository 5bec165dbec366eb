"""Hello — the smallest flashapi app.

One route, one responder.

Run:
    cd examples/hello && python app.py
"""

from flashapi import App, Responder, draw

app = App(routes=draw(("GET", "/hello", "HelloResponder")))


@app.responder
class HelloResponder(Responder):
    def call(self):
        return self.ok(message="Hello, World!")


if __name__ == "__main__":
    app.run()
