from ..colors.rgb import ColorRGB

WHITE = ColorRGB((255, 255, 255))
BLACK = ColorRGB((0, 0, 0))
RED = ColorRGB((255, 0, 0))
GREEN = ColorRGB((0, 255, 0))
BLUE = ColorRGB((0, 0, 255))
YELLOW = ColorRGB((255, 255, 0))
PURPLE = ColorRGB((75, 25, 150))

# white is the "closest", purple the "farthest"
HEAT_STOPS = (WHITE, RED, YELLOW, GREEN, BLUE, PURPLE)
