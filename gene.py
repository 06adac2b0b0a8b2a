# ==================================================
#   GENE
# ==================================================
import random
import numpy as np
from config import GENE_LENGTH, PREDATION_DIFFERENCE


class Gene:
    """Bit string deciding a life's color and who it may eat."""
    def __init__(self, bits):
        self.bits = np.asarray(bits, dtype=np.uint8)

    @classmethod
    def random(cls, length=GENE_LENGTH):
        return cls(np.array([random.randrange(2) for _ in range(length)], dtype=np.uint8))

    @classmethod
    def empty(cls):
        return cls(np.zeros(0, dtype=np.uint8))

    @property
    def is_empty(self):
        return self.bits.size == 0

    def __len__(self):
        return int(self.bits.size)

    def __eq__(self, other):
        if not isinstance(other, Gene):
            return NotImplemented
        return np.array_equal(self.bits, other.bits)

    def __repr__(self):
        return "Gene(%s)" % "".join(str(b) for b in self.bits)

    def copy(self):
        return Gene(self.bits.copy())

    def mutated(self):
        """Copy with one random bit flipped."""
        bits = self.bits.copy()
        if bits.size:
            i = random.randrange(bits.size)
            bits[i] ^= 1
        return Gene(bits)

    def difference(self, other):
        """Fraction of differing bits, 0..1."""
        if self.is_empty or len(self) != len(other):
            return 0.0
        return float(np.count_nonzero(self.bits != other.bits)) / len(self)

    def can_eat(self, other, threshold):
        """A predator eats lives whose genes differ enough from its own."""
        if self.is_empty or other.is_empty or len(self) != len(other):
            return False
        return self.difference(other) * threshold >= PREDATION_DIFFERENCE

    @property
    def color(self):
        """RGB from the share of set bits in each third of the gene."""
        if self.is_empty:
            return (128, 128, 128)
        channels = np.array_split(self.bits, 3)
        return tuple(int(55 + 200 * c.mean()) if c.size else 55 for c in channels)
