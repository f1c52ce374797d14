from __future__ import annotations

import json

from viewcore import Mediator, Notification, ViewSettings, create_view


class EchoMediator(Mediator):
    NAME = "EchoMediator"

    def list_notification_interests(self):
        return ["echo", "shout"]

    def handle_notification(self, notification):
        body = notification.get_body()
        if notification.get_name() == "shout" and isinstance(body, str):
            body = body.upper()
        print(f"[{self.get_mediator_name()}]", body)

    def on_register(self):
        print(f"[{self.get_mediator_name()}] registered")

    def on_remove(self):
        print(f"[{self.get_mediator_name()}] removed")


class CounterMediator(Mediator):
    NAME = "CounterMediator"

    def __init__(self):
        super().__init__(view_component={"count": 0})

    def list_notification_interests(self):
        return ["echo"]

    def handle_notification(self, notification):
        self.view_component["count"] += 1
        print(f"[{self.get_mediator_name()}] seen {self.view_component['count']} echo(es)")


def main():
    view = create_view(ViewSettings.from_env())
    view.register_mediator(EchoMediator())
    view.register_mediator(CounterMediator())

    print("View ready. Type /quit to exit. Examples:")
    print("  echo hello")
    print("  shout {\"text\": \"hi\"}")
    print("  /remove EchoMediator")
    print("  /list")

    while True:
        user_input = input("you> ").strip()
        if user_input.lower() in {"/quit", "quit", "exit"}:
            break
        if not user_input:
            continue

        if user_input == "/list":
            print("mediators:", ", ".join(view.mediator_names()) or "(none)")
            continue
        if user_input.startswith("/remove "):
            removed = view.remove_mediator(user_input[8:].strip())
            if removed is None:
                print("no such mediator")
            continue

        split = user_input.split(" ", 1)
        body = split[1] if len(split) > 1 else None
        if body and body.startswith("{"):
            try:
                body = json.loads(body)
            except json.JSONDecodeError:
                pass  # send as plain text
        view.notify_observers(Notification(name=split[0], body=body))


if __name__ == "__main__":
    main()
