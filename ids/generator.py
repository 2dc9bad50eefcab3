from ids.entropy import EntropyMixer, create_entropy
from ids.identifier import Identifier
from utils.timestamp import now_ms


class Generator:
    """Creates identifiers from a clock and an entropy source.

    Build one per process and share it; the entropy source keeps the only
    mutable state (its counter).
    """

    def __init__(self, clock=None, entropy=None):
        self.clock = clock or now_ms
        self.entropy = entropy or EntropyMixer()

    @classmethod
    def from_config(cls, config):
        return cls(entropy=create_entropy(config.entropy))

    def generate(self):
        return Identifier.from_parts(self.clock(), self.entropy.next())

    def generate_many(self, count):
        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.generate() for _ in range(count)]
