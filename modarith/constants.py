# modarith/constants.py

# Transform-friendly primes (c * 2^k + 1) and a primitive root of each
MOD_167772161 = 167772161    # 5 * 2^25 + 1
MOD_469762049 = 469762049    # 7 * 2^26 + 1
MOD_924844033 = 924844033    # 441 * 2^21 + 1
MOD_998244353 = 998244353    # 119 * 2^23 + 1
MOD_1012924417 = 1012924417  # 483 * 2^21 + 1
MOD_1224736769 = 1224736769  # 73 * 2^24 + 1

PRIMITIVE_ROOTS = {
    MOD_167772161: 3,
    MOD_469762049: 3,
    MOD_924844033: 5,
    MOD_998244353: 3,
    MOD_1012924417: 5,
    MOD_1224736769: 3,
}

SUPPORTED_MODULI = tuple(sorted(PRIMITIVE_ROOTS))

DEFAULT_MODULUS = MOD_998244353

# int64 butterflies multiply two residues, so both must stay below 2^31
MAX_KERNEL_MODULUS = 1 << 31
