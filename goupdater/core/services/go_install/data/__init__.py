"""
L0 Data — constants and per-OS file maps. Pure data, no logic.
"""
