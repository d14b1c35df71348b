"""Fixed Oklab matrices.

From Björn Ottosson's reference implementation:
https://bottosson.github.io/posts/oklab/#converting-from-linear-srgb-to-oklab

The coefficients must stay exactly as published; round trips of 8-bit sRGB
depend on them.
"""


# Linear RGB -> LMS
RGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS cube root -> Oklab
LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# Oklab -> LMS cube root
OKLAB_TO_LMS = (
    (1.0, +0.3963377774, +0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS -> Linear RGB
LMS_TO_RGB = (
    (+4.0767416621, -3.3077115913, +0.2309699292),
    (-1.2684380046, +2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, +1.7076147010),
)


def apply(matrix, x, y, z):
    """Multiply a 3x3 matrix by (x, y, z); works on floats and numpy arrays alike."""
    r0, r1, r2 = matrix
    return (
        r0[0] * x + r0[1] * y + r0[2] * z,
        r1[0] * x + r1[1] * y + r1[2] * z,
        r2[0] * x + r2[1] * y + r2[2] * z,
    )
