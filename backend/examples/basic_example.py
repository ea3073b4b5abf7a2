"""
基础示例脚本

演示如何使用 KDP 组合预测模型进行模拟
"""

import sys
import json
from pathlib import Path

# 添加项目路径
sys.path.insert(0, str(Path(__file__).parent.parent))

from kdp_forecast.models.config import PortfolioConfig
from kdp_forecast.core.simulator import run_simulation
from kdp_forecast.utils.validation import validate_portfolio


def main():
    # 1. 从 JSON 文件加载配置
    config_path = Path(__file__).parent / "sample_portfolio.json"
    with open(config_path, "r", encoding="utf-8") as f:
        config_dict = json.load(f)

    config = PortfolioConfig(**config_dict)
    print("=" * 60)
    print("KDP 组合预测示例")
    print("=" * 60)

    # 2. 校验配置
    print("\n[1] 配置校验...")
    validation = validate_portfolio(config)
    print(f"    有效: {validation.valid}")
    if validation.warnings:
        print(f"    警告: {validation.warnings}")
    if validation.errors:
        print(f"    错误: {validation.errors}")
        return

    # 3. 运行模拟
    print("\n[2] 运行模拟...")
    print(f"    书籍数: {len(config.books)}")

    result = run_simulation(config)

    # 4. 输出结果
    print(f"\n[3] 模拟结果 (耗时 {result.execution_time_ms}ms)")
    print("-" * 60)

    summary = result.summary
    milestones = result.milestones

    print(f"\n💰 组合财务指标:")
    print(f"    总收入: ${summary.total_revenue:,.2f}")
    print(f"    广告支出: ${summary.total_ad_spend:,.2f}")
    print(f"    净利润: ${summary.total_net_profit:,.2f}")
    print(f"    ROI: {summary.roi:.1f}%")
    print(f"    总销量: {summary.total_units_sold:,}  KU 阅读: {summary.total_ku_reads:,}")

    print(f"\n🏆 里程碑:")
    print(f"    首个盈利期: {milestones.first_profitable_period or 'N/A'}")
    print(f"    盈亏平衡期: {milestones.break_even_period or 'N/A'}")
    print(f"    收入峰值: ${milestones.peak_revenue_value:,.2f} ({milestones.peak_revenue_period})")

    print(f"\n📚 单书明细:")
    for projection in result.books or []:
        book_summary = projection.summary
        print(
            f"    {projection.title:<28} 首发 {projection.launch_period_key}  "
            f"收入 ${book_summary.total_revenue:,.2f}  ROI {book_summary.roi:.1f}%"
        )

    print("\n" + "=" * 60)
    print("模拟完成!")


if __name__ == "__main__":
    main()
