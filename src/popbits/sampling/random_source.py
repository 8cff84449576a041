"""random_source.py - the caller-owned randomness the samplers draw from.

Everything in the sampling core asks for integers in a bounded range. The
range draws here are bias-free: a candidate of `bit_length` bits is drawn and
rejected until it lands inside the range, so no value is favoured the way
`raw % size` favours small residues when size is not a power of two.

Adapters wrap the generators people already carry around (`random.Random`,
`numpy.random.Generator`, `torch.Generator`). The adapter only reads bits from
the wrapped generator; it never reseeds or copies it.
"""

import random

import numpy as np
import torch

WORD_BITS = 32


class RandomSource(object):
	"""Base class: subclasses provide `getrandbits`, ranges come for free."""

	def getrandbits(self, n):
		raise NotImplementedError

	def randbelow(self, n):
		"""Uniform integer in [0, n)."""
		if n <= 0:
			raise ValueError(f"randbelow bound must be positive, got {n}")
		if n == 1:
			return 0
		k = (n - 1).bit_length()
		while True:
			r = self.getrandbits(k)
			if r < n:
				return r

	def randint(self, lo, hi):
		"""Uniform integer in the inclusive range [lo, hi]."""
		if lo > hi:
			raise ValueError(f"empty range [{lo}, {hi}]")
		return lo + self.randbelow(hi - lo + 1)


class PythonRandomSource(RandomSource):
	def __init__(self, rng):
		self.rng = rng

	def getrandbits(self, n):
		return self.rng.getrandbits(n)


class _WordRandomSource(RandomSource):
	"""Builds n-bit integers out of 32-bit words."""

	def _words(self, count):
		raise NotImplementedError

	def getrandbits(self, n):
		if n <= 0:
			raise ValueError(f"number of bits must be positive, got {n}")
		count = -(-n // WORD_BITS)
		out = 0
		for word in self._words(count):
			out = (out << WORD_BITS) | int(word)
		return out >> (count * WORD_BITS - n)


class NumpyRandomSource(_WordRandomSource):
	def __init__(self, rng):
		self.rng = rng

	def _words(self, count):
		return self.rng.integers(0, 2 ** WORD_BITS, size=count, dtype=np.uint32)


class TorchRandomSource(_WordRandomSource):
	def __init__(self, rng):
		self.rng = rng

	def _words(self, count):
		words = torch.randint(0, 2 ** WORD_BITS, (count,), dtype=torch.int64, generator=self.rng)
		return words.tolist()


def as_random_source(rng=None):
	"""Coerce whatever the caller passed into a RandomSource.

	Args:
		rng: None (fresh unseeded `random.Random`), an int seed, a
			`random.Random`, a `numpy.random.Generator`, a `torch.Generator`
			or a RandomSource, which is returned unchanged.
	"""
	if isinstance(rng, RandomSource):
		return rng
	if rng is None:
		return PythonRandomSource(random.Random())
	if isinstance(rng, bool):
		raise TypeError("a bool is not a usable seed")
	if isinstance(rng, (int, np.integer)):
		return PythonRandomSource(random.Random(int(rng)))
	if isinstance(rng, random.Random):
		return PythonRandomSource(rng)
	if isinstance(rng, np.random.Generator):
		return NumpyRandomSource(rng)
	if isinstance(rng, torch.Generator):
		return TorchRandomSource(rng)
	raise TypeError(f"cannot use {type(rng).__name__} as a random source")
