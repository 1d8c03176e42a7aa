"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded names, sizes and URLs scattered
   throughout the UI code.
2. Identity: It holds the application and organization names Qt uses for
   its settings and window titles.

Exports:
    VISIBLE_APP_NAME (str): Title shown in the window and header.
    VISUALIZER_SIZE_PX (int): Edge of the 1 m x 1 m preview [display px].
    DONATION_URL (str), PRO_URL (str): Outbound links in the footer.
"""

ORG_ID = "texel-architect"
APP_ID = "texel-architect"

VISIBLE_APP_NAME = "Texel Architect"
APP_TAGLINE = "Calculate and visualize consistent texture density for your environments."

WINDOW_SIZE: tuple[int, int] = (1100, 720)

# The preview always represents 1 m x 1 m
VISUALIZER_SIZE_PX: int = 400
VISUALIZER_AREA_CM: float = 100.0

DONATION_URL = "https://ko-fi.com/shawn_dis"
PRO_URL = "https://gumroad.com/l/YOURPRODUCTLINK"
