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

import re

__all__ = [
	"MASK64",
	"bitreverse",
	"hex2int",
	"int2poly",
]

MASK64 = (1 << 64) - 1

def bitreverse(value, nrBits=64):
	"""Reverse the bits in an integer.
	"""
	ret = 0
	for _ in range(nrBits):
		ret = (ret << 1) | (value & 1)
		value >>= 1
	return ret

def hex2int(hexString, nrBits=64):
	"""Convert a hex string with optional 0x prefix to an unsigned integer.
	Only hex digits are accepted after the prefix.
	"""
	m = re.fullmatch(r"(?:0[xX])?([0-9a-fA-F]+)", hexString)
	if not m:
		raise ValueError(f"'{hexString}' is not a hexadecimal number.")
	value = int(m.group(1), 16)
	if value > (1 << nrBits) - 1:
		raise ValueError(f"'{hexString}' does not fit into {nrBits} bits.")
	return value

def int2poly(poly, nrBits=64):
	"""Convert binary integer polynomial coefficient to string.
	The implicit x^nrBits term is always included.
	"""
	poly &= (1 << nrBits) - 1
	p = []
	shift = 0
	while poly:
		if poly & 1:
			if shift == 0:
				p.append("1")
			elif shift == 1:
				p.append("x")
			else:
				p.append(f"x^{shift}")
		shift += 1
		poly >>= 1
	p.append(f"x^{nrBits}")
	return " + ".join(reversed(p))
