"""IPT opponent color space: conversions, gamut limiting and color editing.

This package provides:
- RGB <-> IPT conversions through LMS, for floats, numpy arrays or torch tensors
- A packed 32-bit color word (intensity, protan, tritan, alpha bytes)
- Gamut testing and chroma-reducing gamut limiting
- Channel editors, HSL-style edits, blending and gradients
- Random in-gamut colors and a small named palette

Example:
    import random
    from iptcolor import from_hex, lighten, to_hex, random_color, parse_description

    orange = from_hex("#FF7F00")
    print(to_hex(lighten(orange, 0.25)))

    color = random_color(random.Random(7))
    print(color.intensity, color.protan, color.tritan)

    print(to_hex(parse_description("darker rich teal")))
"""

from .packing import (
    IPTColor,
    pack,
    unpack,
    intensity,
    protan,
    tritan,
    alpha,
    alpha_int,
    word_to_float,
    float_to_word,
)

from .ipt import (
    srgb_to_ipt,
    ipt_to_srgb,
    linear_rgb_to_ipt,
    ipt_to_linear_rgb,
)

from .gamut import (
    in_gamut,
    in_gamut_packed,
    limit_to_gamut,
    limit_packed,
    limit_to_gamut_arrays,
    pack_limited,
)

from .conversions import (
    from_rgba8888,
    from_abgr8888,
    from_rgba,
    from_hex,
    to_rgba8888,
    to_abgr8888,
    to_rgba,
    to_hex,
    red,
    green,
    blue,
    red_int,
    green_int,
    blue_int,
)

from .hsl import hue, saturation, lightness, from_hsl, to_edited, shift_hue

from .editing import (
    lighten,
    darken,
    protan_up,
    protan_down,
    tritan_up,
    tritan_down,
    blot,
    fade,
    dullen,
    enrich,
    edit_ipt,
    inverse_lightness,
    differentiate_lightness,
    offset_lightness,
    lessen_change,
    random_edit,
)

from .blending import (
    lerp_colors,
    lerp_colors_blended,
    mix,
    uneven_mix,
    multiply_alpha,
    set_alpha,
    make_gradient,
    gradient_chain,
    gradient_lut,
)

from .sampling import random_color, random_packed, estimate_gamut_fraction
from .palette import named_colors, lookup, names_by_lightness, parse_description
from .errors import ColorError, ColorParseError, SamplingExhaustedError, GradientError

__all__ = [
    # Packed words
    'IPTColor',
    'pack',
    'unpack',
    'intensity',
    'protan',
    'tritan',
    'alpha',
    'alpha_int',
    'word_to_float',
    'float_to_word',
    # IPT conversions
    'srgb_to_ipt',
    'ipt_to_srgb',
    'linear_rgb_to_ipt',
    'ipt_to_linear_rgb',
    # Gamut
    'in_gamut',
    'in_gamut_packed',
    'limit_to_gamut',
    'limit_packed',
    'limit_to_gamut_arrays',
    'pack_limited',
    # RGB formats
    'from_rgba8888',
    'from_abgr8888',
    'from_rgba',
    'from_hex',
    'to_rgba8888',
    'to_abgr8888',
    'to_rgba',
    'to_hex',
    'red',
    'green',
    'blue',
    'red_int',
    'green_int',
    'blue_int',
    # HSL
    'hue',
    'saturation',
    'lightness',
    'from_hsl',
    'to_edited',
    'shift_hue',
    # Editing
    'lighten',
    'darken',
    'protan_up',
    'protan_down',
    'tritan_up',
    'tritan_down',
    'blot',
    'fade',
    'dullen',
    'enrich',
    'edit_ipt',
    'inverse_lightness',
    'differentiate_lightness',
    'offset_lightness',
    'lessen_change',
    'random_edit',
    # Blending
    'lerp_colors',
    'lerp_colors_blended',
    'mix',
    'uneven_mix',
    'multiply_alpha',
    'set_alpha',
    'make_gradient',
    'gradient_chain',
    'gradient_lut',
    # Sampling
    'random_color',
    'random_packed',
    'estimate_gamut_fraction',
    # Palette
    'named_colors',
    'lookup',
    'names_by_lightness',
    'parse_description',
    # Errors
    'ColorError',
    'ColorParseError',
    'SamplingExhaustedError',
    'GradientError',
]
