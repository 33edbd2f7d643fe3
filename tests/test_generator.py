import dataclasses
import pytest

from libclmulgen.generator import *
from libclmulgen.util import *

NVME = 0xAD93D23594C93659
ECMA = 0x42F0E1EBA9EA3693

NVME_KEYS = (
	(128, 0x21e9761e252621ac),
	(192, 0xeadc41fd2ba3d420),
	(256, 0xe1e0bb9d45d7a44c),
	(320, 0xb0bc2e589204f500),
	(384, 0xa3ffdc1fe8e82a8b),
	(448, 0xbdd7ac0ee1a4a0f0),
	(512, 0x62242240ace5045a),
	(576, 0x0c32cdb31e18a84a),
	(640, 0x03363823e6e791e5),
	(704, 0x7b0ab10dd0f809fe),
	(768, 0x34f5a24e22d66e90),
	(832, 0x3c255f5ebc414423),
	(896, 0x946588403d4adcbc),
	(960, 0xd083dd594d96319d),
	(1024, 0x5f852fb61e8d92dc),
	(1088, 0xa1ca681e733f9c40),
)

ECMA_KEYS = (
	(128, 0xdabe95afc7875f40),
	(192, 0xe05dd497ca393ae4),
	(256, 0x3be653a30fe1af51),
	(320, 0x60095b008a9efa44),
	(384, 0x69a35d91c3730254),
	(448, 0xb5ea1af9c013aca4),
	(512, 0x081f6054a7842df4),
	(576, 0x6ae3efbb9dd441f3),
	(640, 0x0e31d519421a63a5),
	(704, 0x2e30203212cac325),
	(768, 0xe4ce2cd55fea0037),
	(832, 0x2fe3fd2920ce82ec),
	(896, 0x947874de595052cb),
	(960, 0x9e735cb59b4724da),
	(1024, 0xd7d86b2af73de740),
	(1088, 0x8757d71d4fcc1000),
)

def test_key_exponents():
	assert KEY_EXPONENTS == tuple(range(128, 1089, 64))
	assert len(KEY_EXPONENTS) == 16

@pytest.mark.parametrize("exponent, key", NVME_KEYS)
def test_generateKey_nvme(exponent, key):
	assert generateKey(exponent, NVME) == key

@pytest.mark.parametrize("exponent, key", ECMA_KEYS)
def test_generateKey_ecma(exponent, key):
	assert generateKey(exponent, ECMA) == key

@pytest.mark.parametrize("polynomial", [0, 1, NVME, ECMA, MASK64])
def test_generateKey_short_distance(polynomial):
	for exponent in (0, 1, 32, 63, 64):
		assert generateKey(exponent, polynomial) == 0

def test_generateKey_first_step():
	# x^64 mod P is the polynomial itself.
	assert generateKey(65, NVME) == bitreverse(NVME)
	assert generateKey(65, 0) == 0

def test_generateMu():
	assert generateMu(ECMA) == 0x9c3e466c172963d5
	assert generateMu(NVME) == 0x27ecfa329aef9f77

def test_generateMu_degenerate():
	# x^127 div x^64 = x^63
	assert generateMu(0) == 1

def test_generateReciprocalPolynomial():
	assert generateReciprocalPolynomial(NVME) == 0x34d926535897936b
	assert generateReciprocalPolynomial(ECMA) == 0x92d8af2baf0e1e85
	assert generateReciprocalPolynomial(0) == 1
	assert generateReciprocalPolynomial(MASK64) == MASK64

def test_results_are_64bit():
	for polynomial in (NVME, ECMA, MASK64, 0x8000000000000000):
		assert 0 <= generateMu(polynomial) <= MASK64
		assert 0 <= generateReciprocalPolynomial(polynomial) <= MASK64
		for exponent in KEY_EXPONENTS:
			assert 0 <= generateKey(exponent, polynomial) <= MASK64

def test_constants_nvme():
	constants = ClmulGen(P=NVME).constants()
	assert constants.polynomial == NVME
	assert constants.keys == NVME_KEYS
	assert constants.mu == 0x27ecfa329aef9f77
	assert constants.reciprocal == 0x34d926535897936b
	assert constants.key(1088) == 0xa1ca681e733f9c40
	with pytest.raises(KeyError):
		constants.key(64)

def test_constants_ecma():
	constants = ClmulGen(P=ECMA).constants()
	assert constants.keys == ECMA_KEYS
	assert constants.mu == 0x9c3e466c172963d5
	assert constants.reciprocal == 0x92d8af2baf0e1e85

def test_constants_items_order():
	labels = [ label for label, _ in ClmulGen(P=NVME).constants().items() ]
	assert labels == [ f"k_{e}" for e in KEY_EXPONENTS ] + [ "mu", "reciprocal" ]

def test_constants_frozen():
	constants = ClmulGen(P=NVME).constants()
	with pytest.raises(dataclasses.FrozenInstanceError):
		constants.mu = 0

def test_constants_deterministic():
	assert ClmulGen(P=ECMA).constants() == ClmulGen(P=ECMA).constants()
	gen = ClmulGen(P=NVME)
	assert gen.constants() == gen.constants()
	assert gen.genText() == ClmulGen(P=NVME).genText()

def test_custom_exponents():
	constants = ClmulGen(P=NVME, exponents=(256, 64, 128)).constants()
	assert constants.keys == ((64, 0), (128, NVME_KEYS[0][1]), (256, NVME_KEYS[2][1]))

@pytest.mark.parametrize("P", [-1, 1 << 64])
def test_invalid_polynomial(P):
	with pytest.raises(ClmulGenError):
		ClmulGen(P=P)

def test_parse_error_is_gen_error():
	assert issubclass(PolynomialParseError, ClmulGenError)

def test_genText():
	lines = ClmulGen(P=NVME).genText().splitlines()
	assert len(lines) == 18
	assert lines[0] == "k_128 = 0x21e9761e252621ac"
	assert lines[8] == "k_640 = 0x3363823e6e791e5"
	assert lines[15] == "k_1088 = 0xa1ca681e733f9c40"
	assert lines[16] == "mu = 0x27ecfa329aef9f77"
	assert lines[17] == "reciprocal = 0x34d926535897936b"

def test_genC():
	code = ClmulGen(P=NVME).genC(name="nvme")
	assert "#ifndef NVME_CLMUL_H_" in code
	assert "#include <stdint.h>" in code
	assert "static const uint64_t nvme_k_128 = UINT64_C(0x21e9761e252621ac);" in code
	assert "static const uint64_t nvme_k_576 = UINT64_C(0x0c32cdb31e18a84a);" in code
	assert "static const uint64_t nvme_mu = UINT64_C(0x27ecfa329aef9f77);" in code
	assert "static const uint64_t nvme_reciprocal = UINT64_C(0x34d926535897936b);" in code
	assert "0xAD93D23594C93659 (hex)" in code
	assert code.rstrip().endswith("#endif /* NVME_CLMUL_H_ */")

def test_genC_declOnly():
	code = ClmulGen(P=NVME).genC(declOnly=True, includeGuards=False, includes=False)
	decls = [ l for l in code.splitlines() if not l.startswith("//") and l ]
	assert len(decls) == 18
	assert decls[0] == "static const uint64_t crc64_k_128;"
	assert "#include" not in code
	assert "#ifndef" not in code

def test_genRust():
	code = ClmulGen(P=ECMA).genRust(name="crc64_xz")
	assert "pub const CRC64_XZ_K_128: u64 = 0xdabe95afc7875f40;" in code
	assert "pub const CRC64_XZ_MU: u64 = 0x9c3e466c172963d5;" in code
	assert "pub const CRC64_XZ_RECIPROCAL: u64 = 0x92d8af2baf0e1e85;" in code

@pytest.mark.parametrize("name", ["", "1abc", "a-b", "a b"])
def test_invalid_name(name):
	gen = ClmulGen(P=NVME)
	with pytest.raises(ClmulGenError):
		gen.genC(name=name)
	with pytest.raises(ClmulGenError):
		gen.genRust(name=name)
