from dataclasses import dataclass


class ConfigError(ValueError):
    """Invalid board dimensions or word length bounds."""


@dataclass(frozen=True)
class BoardConfig:
    width: int = 4
    height: int = 4
    max_length: int | None = None
    """Longest accepted word; defaults to the number of cells."""
    min_length: int = 3

    def __post_init__(self):
        if self.max_length is None:
            object.__setattr__(self, "max_length", self.width * self.height)
        if self.width <= 1 or self.height <= 1:
            raise ConfigError(f"Board must be at least 2x2, got {self.width}x{self.height}")
        if self.min_length <= 1:
            raise ConfigError(f"min_length must be at least 2, got {self.min_length}")
        if self.max_length > self.num_cells:
            raise ConfigError(
                f"max_length={self.max_length} exceeds the {self.num_cells} cells on the board"
            )
        if self.min_length > self.max_length:
            raise ConfigError(
                f"min_length={self.min_length} is greater than max_length={self.max_length}"
            )

    @property
    def dims(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def num_cells(self) -> int:
        return self.width * self.height
