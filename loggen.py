import datetime
import random
from typing import Iterator, Optional

SOURCES = [
    "api::server",
    "api::routes::users",
    "db::pool",
    "worker::queue",
    "worker::jobs::email",
    "auth::session",
]

LEVELS = ["ERROR", "WARN", "INFO", "DEBUG", "TRACE"]

MESSAGES = {
    "ERROR": "request failed: connection reset by peer",
    "WARN": "slow query took {ms}ms",
    "INFO": "handled request id={id}",
    "DEBUG": "pool stats idle={n} busy={m}",
    "TRACE": "entering handler id={id}",
}


def generate_tracing_lines(
    count: int,
    seed: Optional[int] = None,
    start: Optional[datetime.datetime] = None,
) -> Iterator[str]:
    """
    Lines shaped like tracing's default formatter:
      2025-08-28T04:57:18.797136Z INFO  crate::path::file: message

    Timestamps keep a constant width and the level is padded to 5.
    """
    rng = random.Random(seed)
    current_time = start or datetime.datetime(2025, 8, 28, 4, 57, 18, 797136)

    for _ in range(count):
        current_time += datetime.timedelta(microseconds=rng.randint(1, 2_000_000))
        ts = current_time.strftime("%Y-%m-%dT%H:%M:%S.%fZ")
        level = rng.choice(LEVELS)
        source = rng.choice(SOURCES)
        msg = MESSAGES[level].format(
            ms=rng.randint(100, 5000),
            id=rng.randint(1000, 9999),
            n=rng.randint(0, 10),
            m=rng.randint(0, 10),
        )
        yield f"{ts} {level:<5} {source}: {msg}"


def generate_tracing_logs(filename="tracing.log", target_lines=10000, seed=None):
    with open(filename, "w", encoding="utf-8") as f:
        for line in generate_tracing_lines(target_lines, seed=seed):
            f.write(line + "\n")

    print(f"Generated {target_lines} lines in {filename}")


if __name__ == "__main__":
    generate_tracing_logs()
