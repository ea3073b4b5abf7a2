"""
KDP 组合收益预测模型
"""

__version__ = "1.0.0"
