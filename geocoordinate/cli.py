#!/usr/bin/env python3
"""
Command-line access to the geocoordinate codecs.

Usage:
    # Geohash of a point (longitude first)
    geocoordinate encode 106.709437 -6.329094 --length 7

    # Center of a geohash cell
    geocoordinate decode qqggupz6q57

    # Integer hash and back
    geocoordinate hash 106.709437 -6.329094 --precision 52
    geocoordinate unhash 3195111357704980 --precision 52

    # Distance in meters
    geocoordinate distance -1.7297222 53.3205555 -1.6997222 53.3186111

    # Time the hash computation
    geocoordinate bench --iterations 100000
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .config import BASE_PRECISION, DEFAULT_HASH_PRECISION, load_settings
from .coordinate import GeoCoordinate
from .errors import GeoCoordinateError
from .geohash import decode_geohash, to_geohash
from .hashing import decode

logger = logging.getLogger(__name__)

BENCH_POINT = (106.709437, -6.329094)


def cmd_encode(args) -> int:
    coord = GeoCoordinate(args.longitude, args.latitude)
    print(to_geohash(coord, args.length))
    return 0


def cmd_decode(args) -> int:
    coord = decode_geohash(args.geohash)
    print(coord)
    return 0


def cmd_hash(args) -> int:
    coord = GeoCoordinate(args.longitude, args.latitude)
    print(coord.get_hash(args.precision))
    return 0


def cmd_unhash(args) -> int:
    print(decode(args.value, args.precision))
    return 0


def cmd_distance(args) -> int:
    a = GeoCoordinate(args.lon1, args.lat1)
    b = GeoCoordinate(args.lon2, args.lat2)
    print(f"{a.distance_to(b):.4f}")
    return 0


def cmd_bench(args) -> int:
    """Time coordinate construction plus hash computation."""
    if args.iterations < 1:
        logger.error("--iterations must be at least 1")
        return 1

    lon, lat = BENCH_POINT
    logger.info(f"Hashing {BENCH_POINT} {args.iterations:,} times")

    start = time.perf_counter()
    for _ in range(args.iterations):
        GeoCoordinate(lon, lat).get_hash()
    elapsed = time.perf_counter() - start

    per_op_us = elapsed / args.iterations * 1e6
    print(f"iterations: {args.iterations}")
    print(f"total:      {elapsed:.4f} s")
    print(f"per hash:   {per_op_us:.3f} us")
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        prog='geocoordinate',
        description='Encode and decode coordinates as integer hashes and geohashes',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  geocoordinate encode 106.709437 -6.329094
  geocoordinate decode qqggupz6q57
  geocoordinate distance -1.7297222 53.3205555 -1.6997222 53.3186111
        """
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--log-level',
        default=settings.log_level,
        help=f'Log level (default: {settings.log_level})'
    )

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('encode', help='Geohash of a longitude/latitude pair')
    p.add_argument('longitude', type=float)
    p.add_argument('latitude', type=float)
    p.add_argument(
        '--length', '-l',
        type=int,
        default=settings.geohash_length,
        help=f'Geohash length 1-12 (default: {settings.geohash_length})'
    )
    p.set_defaults(func=cmd_encode)

    p = sub.add_parser('decode', help='Center of a geohash cell')
    p.add_argument('geohash')
    p.set_defaults(func=cmd_decode)

    p = sub.add_parser('hash', help='Integer hash of a longitude/latitude pair')
    p.add_argument('longitude', type=float)
    p.add_argument('latitude', type=float)
    p.add_argument(
        '--precision', '-p',
        type=int,
        default=DEFAULT_HASH_PRECISION,
        help=f'Hash bits 0-{BASE_PRECISION} (default: {DEFAULT_HASH_PRECISION})'
    )
    p.set_defaults(func=cmd_hash)

    p = sub.add_parser('unhash', help='Center of the cell of an integer hash')
    p.add_argument('value', type=int)
    p.add_argument(
        '--precision', '-p',
        type=int,
        default=DEFAULT_HASH_PRECISION,
        help=f'Hash bits 0-{BASE_PRECISION} (default: {DEFAULT_HASH_PRECISION})'
    )
    p.set_defaults(func=cmd_unhash)

    p = sub.add_parser('distance', help='Great-circle distance in meters')
    p.add_argument('lon1', type=float)
    p.add_argument('lat1', type=float)
    p.add_argument('lon2', type=float)
    p.add_argument('lat2', type=float)
    p.set_defaults(func=cmd_distance)

    p = sub.add_parser('bench', help='Time the hash computation')
    p.add_argument('--iterations', '-n', type=int, default=100000)
    p.set_defaults(func=cmd_bench)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, args.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')

    try:
        return args.func(args)
    except GeoCoordinateError as e:
        logger.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
