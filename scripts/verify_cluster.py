#!/usr/bin/env python3
"""
Check that a cluster is Elasticsearch:
- build a client from config/env (or --url)
- run product verification against GET /
- print the resulting verification state

Exit codes: 0 verified, 1 not Elasticsearch, 2 transport error.
Use --mock FLAVOUR to run against a canned server instead of the network.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from esclient import Client, NotElasticsearchError, TransportError, load_client_config
from esclient.integrations.clients.mocks import MockTransport, available_flavours


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def build_client(args: argparse.Namespace) -> Client:
    if args.mock:
        return Client(transport=MockTransport(flavour=args.mock))
    cfg = load_client_config(args.config, url=args.url)
    return Client(config=cfg)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Verify that a server is Elasticsearch")
    parser.add_argument("--url", default=None, help="Server URL (default: ELASTICSEARCH_URL or localhost)")
    parser.add_argument("--config", type=Path, default=None, help="YAML client config file")
    parser.add_argument("--mock", choices=available_flavours(), default=None, help="Use a mock server flavour")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    with build_client(args) as client:
        try:
            state = client.verify()
        except NotElasticsearchError as e:
            print(f"NOT VERIFIED: {e}")
            return 1
        except TransportError as e:
            print(f"ERROR: could not reach server: {e}")
            return 2

    print(f"VERIFIED: {state.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
