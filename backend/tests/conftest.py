"""Shared test fixtures."""

from __future__ import annotations

import pytest

from avatarkit.engine.palette import Palette, derive_palette


# Minimal tagged template
TWO_PATH_SVG = '<path id="a_primary" d="M0 0"/><path id="b" d="M1 1"/>'

# Character template exercising every category, inline styles and untouched elements
FOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <!-- fox avatar -->
  <g id="body_primary" transform="translate(10 10)">
    <ellipse id="torso" cx="40" cy="55" rx="30" ry="35"/>
  </g>
  <path id="shadow_primarydark" d="M10 80 L90 80" style="stroke: #000; stroke-width: 2"/>
  <circle id="Chest_Secondary" cx="50" cy="60" r="12" style="fill: #ff0000; stroke: #000"/>
  <rect id="sock_secondarydark" x="20" y="90" width="10" height="8" fill="#ffffff" />
  <polygon id="ear_primary" points="30,10 40,0 45,15"></polygon>
  <circle id="eye" cx="40" cy="30" r="3" fill="#111"/>
  <line id="whisker_primary" x1="0" y1="0" x2="5" y2="5"/>
  <circle cx="60" cy="30" r="3" fill="#111"/>
  <text id="label_primary">fox</text>
</svg>'''

# No id tags, colors from the panda known-color table
PANDA_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <style>.fur { fill: #FFF; } .patch { fill:#1e1e1e}</style>
  <circle class="fur" cx="50" cy="50" r="40"/>
  <ellipse cx="35" cy="45" rx="6" ry="8" fill="#444"/>
  <ellipse cx="65" cy="45" rx="6" ry="8" fill="#4445aa"/>
  <path d="M40 70 L60 70" stroke="#444"/>
</svg>'''

PALETTE = Palette(primary="#112233", secondary="#445566")


@pytest.fixture
def two_path_svg() -> str:
    return TWO_PATH_SVG


@pytest.fixture
def fox_svg() -> str:
    return FOX_SVG


@pytest.fixture
def panda_svg() -> str:
    return PANDA_SVG


@pytest.fixture
def derived_palette():
    return derive_palette(PALETTE)
