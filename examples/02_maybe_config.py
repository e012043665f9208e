from __future__ import annotations

from _infra import banner

from functors import maybe


def read_port(env: dict[str, str]) -> int:
    return (
        maybe(env.get("PORT"))
        .map(lambda raw: int(raw) if raw.isdigit() else None)
        .map_empty(lambda: 3000)
        .unwrap()
    )


def main() -> None:
    banner("02_maybe_config: Maybe with defaults and flattening")

    print(read_port({"PORT": "8080"}))
    print(read_port({"PORT": "not-a-port"}))
    print(read_port({}))

    settings = {"db": {"host": "localhost"}}
    host = (
        maybe(settings.get("db"))
        .flat_map(lambda db: maybe(db.get("host")))
        .map(str.upper)
        .unwrap()
    )
    print(f"db host: {host}")


if __name__ == "__main__":
    main()
