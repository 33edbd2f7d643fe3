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

__all__ = [
	"CLMUL_PARAMETERS",
]

# Polynomials in normal (non-reflected) notation without the x^64 term.
CLMUL_PARAMETERS = {
	"CRC-64-ECMA-182" : {
		"polynomial"	: 0x42F0E1EBA9EA3693,
	},
	"CRC-64-XZ" : {
		"polynomial"	: 0x42F0E1EBA9EA3693,
	},
	"CRC-64-NVME" : {
		"polynomial"	: 0xAD93D23594C93659,
	},
	"CRC-64-GO-ISO" : {
		"polynomial"	: 0x000000000000001B,
	},
	"CRC-64-MS" : {
		"polynomial"	: 0x259C84CBA6426349,
	},
	"CRC-64-REDIS" : {
		"polynomial"	: 0xAD93D23594C935A9,
	},
}
