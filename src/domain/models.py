from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from shared.constants import DEFAULT_MARGIN, MAX_ZOOM, MIN_ZOOM, TILE_SIZE


class TilerConfig(BaseModel):
    """
    Tiler settings: tile size, inclusive zoom range, margin and the
    "skip Null Island" switch.

    Frozen: a Tiler swaps in a freshly validated instance on every change,
    so a config handed out earlier never changes under its reader.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='ignore',  # игнорировать лишние поля из профилей
    )

    # Размер тайла по стороне (px)
    tile_size: int = TILE_SIZE
    # Диапазон зума (включительно)
    zoom_min: int = MIN_ZOOM
    zoom_max: int = MAX_ZOOM
    # Дополнительные ряды/колонки тайлов с каждой стороны окна
    margin: int = DEFAULT_MARGIN
    # Пропускать тайлы вокруг (0°, 0°)
    skip_null_island: bool = False

    @field_validator('tile_size')
    @classmethod
    def validate_tile_size(cls, v: int) -> int:
        if v <= 0:
            msg = 'tile_size must be a positive number of pixels'
            raise ValueError(msg)
        return v

    @field_validator('zoom_min', 'zoom_max')
    @classmethod
    def validate_zoom(cls, v: int) -> int:
        if v < 0:
            msg = 'zoom cannot be negative'
            raise ValueError(msg)
        return v

    @field_validator('margin')
    @classmethod
    def validate_margin(cls, v: int) -> int:
        if v < 0:
            msg = 'margin cannot be negative'
            raise ValueError(msg)
        return v

    @model_validator(mode='after')
    def validate_zoom_range(self) -> 'TilerConfig':
        if self.zoom_min > self.zoom_max:
            msg = f'zoom_min ({self.zoom_min}) is greater than zoom_max ({self.zoom_max})'
            raise ValueError(msg)
        return self

    @property
    def zoom_range(self) -> tuple[int, int]:
        return self.zoom_min, self.zoom_max
