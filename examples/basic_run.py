"""Minimal asynchronize example."""

from __future__ import annotations

import asyncio

from asynchronize import asynchronize, run


async def fetch_price(symbol: str) -> float:
    await asyncio.sleep(0.1)
    return {"ABC": 12.5, "XYZ": 3.25}[symbol]


def total(symbols: list[str]):  # type: ignore[no-untyped-def]
    prices = yield [fetch_price(s) for s in symbols]
    return sum(prices)


@asynchronize
def report(symbols: list[str]):  # type: ignore[no-untyped-def]
    value = yield total(symbols)
    return f"{len(symbols)} symbols, total {value}"


async def main() -> None:
    print("Total:", await run(total, ["ABC", "XYZ"]))
    print("Report:", await report(["ABC", "XYZ"]))


if __name__ == "__main__":
    asyncio.run(main())
