from hash_logger import get_logger

DEFAULT_BASE = 257
DEFAULT_MODULO = 2**61 - 1  # mersenne prime

# returned by RollingHash.get for an inverted range; the largest u64, which no
# residue below modulo can reach
INVALID_HASH = 2**64 - 1

logger = get_logger()


def _as_bytes(s) -> bytes:
    if isinstance(s, str):
        return s.encode("utf-8")
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s)
    raise TypeError(f"expected str or bytes-like input, got {type(s).__name__}")


def _check_int(name: str, value):
    # bool is an int subclass, but True/False as a modulus is always a mistake
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


class RollingHash:
    """
    Polynomial rolling hash over a fixed byte sequence.

    Prefix hashes and powers of the base are computed once, after which the
    hash of any substring [l, r) is available in O(1):

        hash[i] = (s[0]+1)*B^(i-1) + (s[1]+1)*B^(i-2) + ... + (s[i-1]+1)*B^0 (mod Q)

    Every byte is offset by one so a zero byte still contributes to the hash.
    Instances are immutable and can be shared between threads.

    :param s: the input; a str is hashed as its UTF-8 encoding
    :param base: the base for the polynomial hash function
    :param modulo: the modulus for the polynomial hash function
    """

    __slots__ = ("_base", "_modulo", "_pow", "_hash")

    def __init__(self, s, base: int = DEFAULT_BASE, modulo: int = DEFAULT_MODULO):
        data = _as_bytes(s)
        _check_int("base", base)
        _check_int("modulo", modulo)
        if base < 0:
            raise ValueError(f"base must be non-negative, got {base}")
        if not 1 <= modulo <= INVALID_HASH:
            raise ValueError(f"modulo must be in [1, {INVALID_HASH}], got {modulo}")

        h = 0
        p = 1 % modulo
        hash_values = [h]
        pow_values = [p]
        for byte in data:
            h = h * base % modulo
            h = (h + byte + 1) % modulo
            p = p * base % modulo
            hash_values.append(h)
            pow_values.append(p)

        self._base = base
        self._modulo = modulo
        self._pow = tuple(pow_values)
        self._hash = tuple(hash_values)

        logger.debug(
            "Built rolling hash tables for %d bytes (base=%d, modulo=%d)",
            len(data),
            base,
            modulo,
        )

    @property
    def base(self) -> int:
        return self._base

    @property
    def modulo(self) -> int:
        return self._modulo

    @property
    def powers(self) -> tuple:
        """base^i mod modulo for i in [0, n]"""
        return self._pow

    @property
    def prefix_hashes(self) -> tuple:
        """Hash of the first i bytes for i in [0, n]"""
        return self._hash

    def __len__(self):
        return len(self._hash) - 1

    def __repr__(self):
        return f"RollingHash(n={len(self)}, base={self._base}, modulo={self._modulo})"

    def _check_index(self, name: str, value):
        _check_int(name, value)
        if not 0 <= value <= len(self):
            raise IndexError(f"{name}={value} out of bounds for input of length {len(self)}")

    def get(self, l: int, r: int) -> int:
        """Hash of the half-open byte range [l, r).

        Args:
            l (int): start index, in [0, n]
            r (int): end index, in [0, n]

        Raises:
            IndexError: if either index is outside [0, n]

        Returns:
            int: the hash in [0, modulo), or INVALID_HASH if r < l
        """
        self._check_index("l", l)
        self._check_index("r", r)
        if r < l:
            return INVALID_HASH

        mod = self._modulo
        return (mod + self._hash[r] - self._hash[l] * self._pow[r - l] % mod) % mod

    def windows(self, size: int):
        """
        Yields the hash of every substring of length size, together with its
        start index, in order of start.

        :param size: the size of the rolling window
        :return: a generator of (hash, start) tuples
        """
        _check_int("size", size)
        if size < 0:
            raise ValueError(f"window size must be non-negative, got {size}")

        mod = self._modulo
        shift = self._pow[size] if size <= len(self) else 0
        for start in range(len(self) - size + 1):
            end = start + size
            yield (mod + self._hash[end] - self._hash[start] * shift % mod) % mod, start
