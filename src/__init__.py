"""
Citation Readiness Engine

Scores content documents for AI answer-engine citation readiness:
1. Extracts trust, structure, technical and semantic signals from markup
2. Combines them into a weighted Citation Guarantee Score (0-100)
3. Classifies citation risk and prescribes fixes
4. Serves scoring over an HTTP API
"""

__version__ = "1.0.0"
