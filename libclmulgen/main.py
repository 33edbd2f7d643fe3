# vim: ts=8 sw=8 noexpandtab
#
#   CRC-64 CLMUL constant generator
#
#   Copyright (c) 2019-2024 Michael Buesch <m@bues.ch>
#
#   This program is free software; you can redistribute it and/or modify
#   it under the terms of the GNU General Public License as published by
#   the Free Software Foundation; either version 2 of the License, or
#   (at your option) any later version.
#
#   This program is distributed in the hope that it will be useful,
#   but WITHOUT ANY WARRANTY; without even the implied warranty of
#   MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#   GNU General Public License for more details.
#
#   You should have received a copy of the GNU General Public License along
#   with this program; if not, write to the Free Software Foundation, Inc.,
#   51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
#

from libclmulgen import *

import sys
import argparse

__all__ = [
	"main",
]

def main():
	try:
		p = argparse.ArgumentParser(
			description="Calculate the fold keys, the Barrett constant mu "
				    "and the reciprocal polynomial for carryless "
				    "multiplication (CLMUL) CRC-64 computation.")
		p.add_argument("polynomial", metavar="POLYNOMIAL_HEX", type=str, nargs="?",
			       help="CRC-64 polynomial in hex, without the x^64 term "
				    "(e.g. 0xAD93D23594C93659).")
		g = p.add_mutually_exclusive_group()
		g.add_argument("-c", "--c", action="store_true", help="Generate a C header")
		g.add_argument("-r", "--rust", action="store_true", help="Generate Rust constants")
		g.add_argument("-t", "--test", action="store_true",
			       help="Run the self test for the polynomial. "
				    "If no polynomial is given, all known algorithms are tested.")
		g.add_argument("-l", "--list", action="store_true", help="List the known algorithms")
		p.add_argument("-a", "--algorithm", type=str,
			       choices=CLMUL_PARAMETERS.keys(),
			       help="Select the polynomial of a known CRC-64 algorithm. "
				    "POLYNOMIAL_HEX overrides it.")
		p.add_argument("-n", "--name", type=str, default="crc64",
			       help="Generated C/Rust constant name prefix")
		p.add_argument("--version", action="version",
			       version=f"%(prog)s {VERSION_STRING}")
		args = p.parse_args()

		if args.list:
			for algName, params in CLMUL_PARAMETERS.items():
				print(f"{algName} = 0x{params['polynomial']:016X}")
			return 0

		polynomial = None
		if args.algorithm is not None:
			polynomial = CLMUL_PARAMETERS[args.algorithm]["polynomial"]
		if args.polynomial is not None:
			try:
				polynomial = hex2int(args.polynomial, 64)
			except ValueError as e:
				raise PolynomialParseError("Polynomial error: " + str(e))

		if args.test:
			if polynomial is None:
				for algName, params in CLMUL_PARAMETERS.items():
					ClmulGenTest(P=params["polynomial"]).runTests(name=algName)
			else:
				ClmulGenTest(P=polynomial).runTests(name=args.algorithm)
			return 0

		if polynomial is None:
			print(f"Usage: {p.prog} [POLYNOMIAL_HEX]")
			return 0

		gen = ClmulGen(P=polynomial)
		if args.c:
			print(gen.genC(name=args.name))
		elif args.rust:
			print(gen.genRust(name=args.name))
		else:
			print(gen.genText())
		return 0
	except ClmulGenError as e:
		print("ERROR: " + str(e), file=sys.stderr)
	return 1
