"""
mojo-spy — Basic Example
~~~~~~~~~~~~~~~~~~~~~~~~

One spy, one method: record calls, switch forward modes, then retire.
"""

from mojo_spy import ForwardMode, Spy


class Mailer:
    def send(self, to: str, subject: str) -> None:
        print(f"   -> really sending {subject!r} to {to}")


def main() -> None:
    mailer = Mailer()
    spy = Spy(mailer, "send")

    print("=" * 60)
    print("mojo-spy — Basic Example")
    print("=" * 60)

    # 1. Silent (default): the call is recorded, nothing is sent
    print("\n1. Silent mode...")
    mailer.send("alice@example.com", "hello")
    print(f"   was_called('alice@example.com', 'hello'): "
          f"{spy.was_called('alice@example.com', 'hello')}")

    # 2. Pass-through: the original runs as well
    print("\n2. Pass-through mode...")
    spy.set_forward_mode(ForwardMode.PASS_THROUGH)
    mailer.send("bob@example.com", "report")

    # 3. Recording off
    print("\n3. Recording off...")
    spy.disable_recording()
    mailer.send("carol@example.com", "unrecorded")
    print(f"   calls recorded so far: {spy.call_count}")

    # 4. Retire
    spy.retire()
    print("\n4. Retired; history:")
    for call in spy.call_history:
        print(f"   {call!r}")


if __name__ == "__main__":
    main()
