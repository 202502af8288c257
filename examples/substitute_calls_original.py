"""
mojo-spy — Substitute Example
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

A substitute that inspects each call and then chains to the original.
"""

from mojo_spy import SpyRegistry


class Ledger:
    def __init__(self) -> None:
        self.entries: list[tuple[str, float]] = []

    def post(self, account: str, amount: float) -> None:
        self.entries.append((account, amount))


def main() -> None:
    ledger = Ledger()

    with SpyRegistry.default().sandbox() as spies:
        spy = spies.spy_on(ledger, "post")

        def rounding_post(account: str, amount: float) -> None:
            print(f"   substitute saw ({account!r}, {amount})")
            spy.original_implementation(account, round(amount, 2))

        spy.set_forward_mode(rounding_post)
        ledger.post("cash", 10.456)
        ledger.post("bank", 3.14159)

        print(f"   recorded: {spy.call_history}")

    print(f"   ledger:   {ledger.entries}")
    print(f"   restored: {'post' not in vars(ledger)}")


if __name__ == "__main__":
    main()
