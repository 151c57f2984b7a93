"""
Configuration and Constants for Layer Sketch

Tunable defaults (canvas size, brush, history depth) live in config.json.
"""

# ==========================================
# 🎨 PALETTE
# ==========================================
PALETTE = ["#000000", "#FF6363", "#FFA600", "#00876C", "#3366FF", "#CBAACB"]

# ==========================================
# 🖌️ TOOLS
# ==========================================
TOOL_SHORTCUTS = {
    "B": "brush",
    "R": "rectangle",
    "C": "circle",
    "E": "eraser",
}

# ==========================================
# 📐 LIMITS
# ==========================================
MIN_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 30
