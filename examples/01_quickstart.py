from __future__ import annotations

from _infra import banner

from kungfu import Error, Ok, Result

from lazyresult import LazyResult, do
from lazyresult import lift as L


def maybe_int(value: int) -> LazyResult[int, str]:
    # Each step prints when it actually runs, so deferral is visible.
    def thunk() -> Result[int, str]:
        print(f"  running step with {value}")
        return Ok(value)

    return LazyResult(thunk)


@do
def three_steps(start: int):
    x = yield maybe_int(start)
    y = yield maybe_int(x + 1)
    z = yield maybe_int(y + 1)
    return (x, y, z)


def main() -> None:
    banner("01_quickstart: construct, then, run")

    chained = maybe_int(1).then(lambda x: maybe_int(x + 1)).then(lambda y: maybe_int(y + 1))
    print("built the chain, nothing ran yet")

    match chained.run():
        case Ok(value):
            print(f"result: {value}")
        case Error(err):
            print(f"error: {err}")

    banner("01_quickstart: do-notation")

    match three_steps(1).run():
        case Ok((x, y, z)):
            print(f"x={x} y={y} z={z}")
        case Error(err):
            print(f"error: {err}")

    banner("01_quickstart: fail fast")

    failing = maybe_int(1).then(lambda _: L.up.fail("step 2 failed")).then(maybe_int)
    match failing.run():
        case Ok(value):
            print(f"result: {value}")
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    main()
