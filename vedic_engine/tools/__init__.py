# Vedic Engine - Tools
