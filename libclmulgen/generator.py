# vim: ts=8 sw=8 noexpandtab
#
#   CRC-64 CLMUL constant generator
#
#   Copyright (c) 2020-2024 Michael Buesch <m@bues.ch>
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

from dataclasses import dataclass
from libclmulgen.util import *
from libclmulgen.version import *
import re

__all__ = [
	"ClmulGen",
	"ClmulGenError",
	"ConstantSet",
	"KEY_EXPONENTS",
	"PolynomialParseError",
	"generateKey",
	"generateMu",
	"generateReciprocalPolynomial",
]

# Fold distances in bits, as used by the CLMUL CRC-64 engine.
KEY_EXPONENTS = (
	128,
	192,
	256,
	320,
	384,
	448,
	512,
	576,
	640,
	704,
	768,
	832,
	896,
	960,
	1024,
	1088,
)

class ClmulGenError(Exception):
	pass

class PolynomialParseError(ClmulGenError):
	pass

def generateMu(polynomial):
	"""Generate the Barrett reduction constant mu.

	This runs the binary long division of x^127 by the polynomial
	(with its implicit x^64 term) for exactly 64 quotient bits.
	The numerator is kept as a 1 bit high part and a 64 bit low part.
	The quotient is returned bit reversed for reflected CRCs.
	"""
	numeratorHigh = 1
	numeratorLow = 0
	quotient = 0
	for _ in range(64):
		quotient = (quotient << 1) & MASK64
		if numeratorHigh:
			quotient |= 1
			numeratorLow ^= polynomial
		numeratorHigh = numeratorLow >> 63
		numeratorLow = (numeratorLow << 1) & MASK64
	return bitreverse(quotient)

def generateKey(exponent, polynomial):
	"""Generate the fold key for a distance of 'exponent' bits.

	Starting at x^63 the value is multiplied by x and reduced
	modulo the polynomial (exponent - 64) times, giving
	x^(exponent-1) mod P. The result is bit reversed.
	Exponents of 64 and below do not need a key and return 0.
	"""
	if exponent <= 64:
		return 0
	n = 1 << 63
	for _ in range(exponent - 64):
		# All ones, if the shifted out bit was set.
		mask = -(n >> 63) & MASK64
		n = ((n << 1) & MASK64) ^ (mask & polynomial)
	return bitreverse(n)

def generateReciprocalPolynomial(polynomial):
	"""Generate the reciprocal polynomial.
	"""
	return ((bitreverse(polynomial) << 1) | 1) & MASK64

@dataclass(frozen=True)
class ConstantSet(object):
	polynomial: int
	keys: tuple
	mu: int
	reciprocal: int

	def key(self, exponent):
		for e, key in self.keys:
			if e == exponent:
				return key
		raise KeyError(exponent)

	def items(self):
		"""Yield (label, value) in output order.
		"""
		for exponent, key in self.keys:
			yield f"k_{exponent}", key
		yield "mu", self.mu
		yield "reciprocal", self.reciprocal

class ClmulGen(object):
	"""CRC-64 carryless multiplication constant generator.
	"""

	def __init__(self, P, exponents=KEY_EXPONENTS):
		if P < 0 or P > MASK64:
			raise ClmulGenError(f"Invalid polynomial 0x{P:X}. "
					    f"It is not a 64 bit value.")
		self.__P = P
		self.__exponents = tuple(sorted(exponents))
		self.__constants = None

	@property
	def P(self):
		return self.__P

	def constants(self):
		if self.__constants is None:
			self.__constants = ConstantSet(
				polynomial=self.__P,
				keys=tuple((e, generateKey(e, self.__P))
					   for e in self.__exponents),
				mu=generateMu(self.__P),
				reciprocal=generateReciprocalPolynomial(self.__P))
		return self.__constants

	def __header(self, language):
		return f"""\
THIS IS GENERATED {language.upper()} CODE.
Generated by clmulgen {VERSION_STRING}

This code is Public Domain.
Permission to use, copy, modify, and/or distribute this software for any
purpose with or without fee is hereby granted.

THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES
WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF
MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR ANY
SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES WHATSOEVER
RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN ACTION OF CONTRACT,
NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF OR IN CONNECTION WITH THE
USE OR PERFORMANCE OF THIS SOFTWARE."""

	def __algDescription(self):
		pstr = int2poly(self.__P, 64)
		return (f"CRC polynomial coefficients: {pstr}\n"
			f"                             0x{self.__P:X} (hex)\n"
			f"CRC width:                   64 bits\n"
			f"Constant bit order:          reflected (right shift)\n"
			f"Fold distances:              "
			f"{', '.join(str(e) for e in self.__exponents)} bits\n")

	@staticmethod
	def __checkName(name):
		if not re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", name):
			raise ClmulGenError(f"Invalid identifier name '{name}'.")

	def genText(self):
		return "\n".join(f"{label} = 0x{value:x}"
				 for label, value in self.constants().items())

	def genC(self,
		 name="crc64",
		 declOnly=False,
		 includeGuards=True,
		 includes=True):
		self.__checkName(name)
		ret = []
		ret.append("// vim: ts=4 sw=4 expandtab")
		ret.append("")
		ret.extend("// " + l for l in self.__header("C").splitlines())
		ret.append("")
		if includeGuards:
			ret.append(f"#ifndef {name.upper()}_CLMUL_H_")
			ret.append(f"#define {name.upper()}_CLMUL_H_")
		if includes:
			ret.append("")
			ret.append("#include <stdint.h>")
		ret.append("")
		ret.extend("// " + l for l in self.__algDescription().splitlines())
		ret.append("")
		for label, value in self.constants().items():
			if declOnly:
				ret.append(f"static const uint64_t {name}_{label};")
			else:
				ret.append(f"static const uint64_t {name}_{label} = "
					   f"UINT64_C(0x{value:016x});")
		if includeGuards:
			ret.append("")
			ret.append(f"#endif /* {name.upper()}_CLMUL_H_ */")
		return "\n".join(ret)

	def genRust(self, name="crc64"):
		self.__checkName(name)
		ret = []
		ret.extend("// " + l for l in self.__header("Rust").splitlines())
		ret.append("")
		ret.extend("// " + l for l in self.__algDescription().splitlines())
		ret.append("")
		for label, value in self.constants().items():
			ret.append(f"pub const {name.upper()}_{label.upper()}: u64 = "
				   f"0x{value:016x};")
		return "\n".join(ret)
