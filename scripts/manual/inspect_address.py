"""inspect_address.py: resolves a host:port and shows its wire record."""
import sys

import bpython
from loguru import logger

from serveraddress import ServerAddress

logger.enable("serveraddress")


def main() -> None:
    """Prints the label and record of an address, then opens a repl."""
    if len(sys.argv) != 2:
        print("usage: [uv run] python inspect_address.py host:port")
        exit(1)

    address = ServerAddress.parse(sys.argv[1])
    record = address.to_bytes()
    decoded = ServerAddress.from_bytes(record)

    print(f"label:   {address}")
    print(f"record:  {record.hex(' ')}")
    print(f"decoded: {decoded} (equal: {decoded == address})")
    repl_locals = {
        'address': address,
        'ServerAddress': ServerAddress,
    }
    print("starting repl. access `address`")
    bpython.embed(locals_=repl_locals)


if __name__ == '__main__':
    main()
