#!/usr/bin/env python3

import os
basedir = os.path.abspath(os.path.dirname(__file__))

from libclmulgen.version import VERSION_STRING
from setuptools import setup

with open(os.path.join(basedir, "README.rst"), "rb") as fd:
	readmeText = fd.read().decode("UTF-8")

setup(
	name		= "clmulgen",
	version		= VERSION_STRING,
	description	= "CRC-64 carryless multiplication (CLMUL) constant generator",
	license		= "GNU General Public License v2 or later",
	author		= "Michael Büsch",
	author_email	= "m@bues.ch",
	python_requires = ">=3.7",
	install_requires = [
		"cffi",
	],
	extras_require	= {
		"test" : [
			"pytest",
		],
	},
	scripts		= [
		"clmulgen",
	],
	packages	= [
		"libclmulgen",
	],
	keywords	= "CRC CRC-64 CLMUL PCLMULQDQ Barrett codegenerator",
	classifiers	= [
		"Development Status :: 5 - Production/Stable",
		"Environment :: Console",
		"Intended Audience :: Developers",
		"Intended Audience :: Science/Research",
		"License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
		"Operating System :: OS Independent",
		"Programming Language :: Python",
		"Programming Language :: Python :: 3",
		"Topic :: Scientific/Engineering",
		"Topic :: Software Development",
		"Topic :: Software Development :: Code Generators",
		"Topic :: Utilities",
	],
	long_description=readmeText,
	long_description_content_type="text/x-rst",
)

# vim: ts=8 sw=8 noexpandtab
