import math

# --- Сетка тайлов
# Базовый размер тайла Web Mercator (пикселей)
TILE_SIZE = 256
# Дополнительный размер тайла (HiDPI / векторные тайлы)
TILE_SIZE_512 = 512

# Диапазон уровней приближения по умолчанию (включительно)
MIN_ZOOM = 0
MAX_ZOOM = 24

# Число дополнительных рядов/колонок тайлов за пределами окна просмотра
DEFAULT_MARGIN = 0

# --- «Null Island» (0°, 0°)
# Начиная с этого зума тайлы вокруг начала координат можно пропускать
NULL_ISLAND_MIN_ZOOM = 7
# Зум, на котором область исключения равна одному тайлу (~2.8° вокруг 0,0)
NULL_ISLAND_SPAN_ZOOM = 6

# --- Константы Web Mercator
TAU = 2 * math.pi
DEG_TO_RAD = math.pi / 180
RAD_TO_DEG = 180 / math.pi
# Предельная широта проекции Web Mercator (градусы)
MERCATOR_MAX_LAT_DEG = 85.0511287798066
WORLD_LNG_SPAN_DEG = 360.0
WORLD_LNG_HALF_SPAN_DEG = 180.0

# Разделитель в строковом идентификаторе тайла «x,y,z»
TILE_ID_SEPARATOR = ','

# --- Профили
# Переменная окружения с каталогом профилей
PROFILES_DIR_ENV = 'TILEGRID_PROFILES_DIR'
# Каталог профилей по умолчанию (относительно домашнего каталога)
PROFILES_DIR_DEFAULT = '.tilegrid/profiles'

# --- Логирование
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
