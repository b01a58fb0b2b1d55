import random

from fireworks.logger import get_logger

log = get_logger("rng")


class RNGService:
    _instance: "RNGService | None" = None

    def __init__(self, seed: int | float | str | bytes | bytearray | None = None):
        self._generator = random.Random(seed)
        self._seed_val = seed
        log.debug(f"RNG initialized with seed: {seed!r}")

    @classmethod
    def get(cls) -> "RNGService":
        if cls._instance is None:
            from fireworks.settings import settings

            cls._instance = cls(settings.seed)
        return cls._instance

    @classmethod
    def initialize(cls, seed: int | float | str | bytes | bytearray | None = None) -> None:
        cls._instance = cls(seed)

    def seed(self, a: int | float | str | bytes | bytearray | None = None) -> None:
        self._seed_val = a
        self._generator.seed(a)
        log.debug(f"RNG re-seeded: {a!r}")

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._generator.random()

    def range(self, lo: float, hi: float) -> float:
        """Return a uniform float in [lo, hi).

        An empty or inverted range collapses to the single point ``lo`` so
        callers working with a zero-sized viewport still get a usable value.
        """
        if hi <= lo:
            return lo
        return self._generator.random() * (hi - lo) + lo

    def sign(self) -> int:
        """Return +1 or -1 with equal probability."""
        return 1 if self._generator.random() > 0.5 else -1
