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

from libclmulgen.util import *

__all__ = [
	"Gf2Reference",
]

class Gf2Reference(object):
	"""Generic GF(2) polynomial reference implementation.

	Polynomials are arbitrary precision integers. Bit n is the
	coefficient of x^n. The 64 bit CRC polynomial is extended
	by the implicit x^64 term before any operation.
	"""

	@classmethod
	def fullPoly(cls, polynomial: int, nrBits: int = 64):
		return (1 << nrBits) | (polynomial & ((1 << nrBits) - 1))

	@classmethod
	def mul(cls, a: int, b: int):
		"""Carryless multiplication.
		"""
		ret = 0
		while b:
			if b & 1:
				ret ^= a
			a <<= 1
			b >>= 1
		return ret

	@classmethod
	def divide(cls, dividend: int, divisor: int):
		"""Polynomial division. Returns (quotient, remainder).
		"""
		if not divisor:
			raise ZeroDivisionError("GF(2) polynomial division by zero.")
		quotient = 0
		degree = divisor.bit_length() - 1
		while dividend.bit_length() - 1 >= degree:
			shift = dividend.bit_length() - 1 - degree
			quotient |= 1 << shift
			dividend ^= divisor << shift
		return quotient, dividend

	@classmethod
	def mod(cls, dividend: int, divisor: int):
		return cls.divide(dividend, divisor)[1]

	@classmethod
	def foldKey(cls, exponent: int, polynomial: int):
		"""Reflected x^(exponent-1) mod P.
		"""
		if exponent <= 64:
			return 0
		rem = cls.mod(1 << (exponent - 1), cls.fullPoly(polynomial))
		return bitreverse(rem, 64)

	@classmethod
	def mu(cls, polynomial: int):
		"""Reflected x^127 div P.
		"""
		quotient, _ = cls.divide(1 << 127, cls.fullPoly(polynomial))
		return bitreverse(quotient, 64)

	@classmethod
	def reciprocal(cls, polynomial: int):
		"""The 65 bit reversed P, truncated to 64 bits.
		"""
		return bitreverse(cls.fullPoly(polynomial), 65) & MASK64
