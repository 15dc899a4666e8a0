"""barbook - 칵테일 레시피 카탈로그 백엔드"""

__version__ = "1.0.0"
