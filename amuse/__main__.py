# amuse/__main__.py
import asyncio

from amuse.config.log_setup import configure_logging
from amuse.server import AmuseServer


def main() -> None:
    configure_logging()
    asyncio.run(AmuseServer().serve_forever())


if __name__ == "__main__":
    main()
