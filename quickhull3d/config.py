from decouple import config

# Log configuration
LOG_LEVEL: str = config("QUICKHULL3D_LOG_LEVEL", default="INFO").upper()
LOG_FORMAT: str = config("QUICKHULL3D_LOG_FORMAT", default="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
LOG_DATETIME_FORMAT: str = config("QUICKHULL3D_LOG_DATETIME_FORMAT", default="%H:%M:%S")

# повний аудит граней після кожної вставленої точки (повільно)
DEBUG_CHECKS: bool = config("QUICKHULL3D_DEBUG", cast=bool, default=False)

# Допуски
AUTOMATIC_TOLERANCE = None    # допуск рахується з даних
DEGENERACY_FACTOR = 100       # колінеарність / копланарність симплекса
EARLY_EXIT_FACTOR = 1000      # точка настільки вище грані, що пошук зупиняється
MIN_AREA_FACTOR = 1000        # поріг площі при тріангуляції, у char_length·eps
POINT_CHECK_FACTOR = 10       # check(): наскільки точка може виступати над гранню
