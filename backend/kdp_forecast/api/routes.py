"""
FastAPI 路由定义
"""

import io
import csv
import logging
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import StreamingResponse

from ..models.book import Book, Genre
from ..models.config import PortfolioConfig
from ..models.results import BookProjection, SimulationResult, ValidationResult
from ..core.simulator import run_simulation, project_book
from ..core.demand import GENRE_FACTORS
from ..core.optimizer import AMAZON_SHARE
from ..utils.validation import validate_book, validate_portfolio

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/simulate", response_model=SimulationResult)
async def simulate(config: PortfolioConfig) -> SimulationResult:
    """
    运行组合模拟

    Args:
        config: 组合配置

    Returns:
        SimulationResult 对象
    """
    try:
        # 先校验配置
        validation = validate_portfolio(config)
        if not validation.valid:
            raise HTTPException(
                status_code=400,
                detail={
                    "message": "配置校验失败",
                    "errors": validation.errors,
                    "warnings": validation.warnings,
                }
            )

        return run_simulation(config)

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("组合模拟失败")
        raise HTTPException(
            status_code=500,
            detail={"message": f"模拟执行失败: {str(e)}"}
        )


@router.post("/simulate/book", response_model=BookProjection)
async def simulate_single_book(book: Book) -> BookProjection:
    """
    单书模拟

    Returns:
        BookProjection 对象
    """
    validation = validate_book(book)
    if not validation.valid:
        raise HTTPException(
            status_code=400,
            detail={
                "message": "书籍校验失败",
                "errors": validation.errors,
                "warnings": validation.warnings,
            }
        )
    return project_book(book)


@router.post("/simulate/book/{book_id}", response_model=BookProjection)
async def simulate_portfolio_book(book_id: str, config: PortfolioConfig) -> BookProjection:
    """
    模拟组合中指定 id 的书籍

    Returns:
        BookProjection 对象
    """
    book = config.get_book(book_id)
    if book is None:
        raise HTTPException(
            status_code=404,
            detail={"message": f"书籍不存在: {book_id}"}
        )
    return await simulate_single_book(book)


@router.post("/validate", response_model=ValidationResult)
async def validate(config: PortfolioConfig) -> ValidationResult:
    """
    校验组合配置

    仅校验配置有效性，不执行计算
    """
    return validate_portfolio(config)


@router.post("/export")
async def export_data(
    config: PortfolioConfig,
    format: str = Query(default="csv", pattern="^(csv|json)$"),
):
    """
    导出模拟数据

    Args:
        config: 组合配置
        format: 导出格式 (csv/json)

    Returns:
        文件下载
    """
    try:
        result = run_simulation(config)

        if format == "json":
            return result.model_dump()

        output = io.StringIO()
        writer = csv.writer(output)

        # 写入表头
        writer.writerow([
            "Period", "Label", "Units", "KU_Reads", "Revenue",
            "Amazon_Spend", "Facebook_Spend", "Total_Ad_Spend",
            "Net_Profit", "Cumulative_Profit",
        ])

        # 写入数据
        cumulative_profit = 0.0
        for period in result.periods:
            cumulative_profit += period.net_profit
            writer.writerow([
                period.period_key,
                period.label,
                period.units_sold,
                period.ku_reads,
                round(period.gross_revenue, 2),
                round(period.amazon_spend, 2),
                round(period.facebook_spend, 2),
                round(period.total_ad_spend, 2),
                round(period.net_profit, 2),
                round(cumulative_profit, 2),
            ])

        output.seek(0)
        return StreamingResponse(
            iter([output.getvalue()]),
            media_type="text/csv",
            headers={
                "Content-Disposition": "attachment; filename=kdp_forecast.csv"
            }
        )

    except Exception as e:
        logger.exception("导出失败")
        raise HTTPException(
            status_code=500,
            detail={"message": f"导出失败: {str(e)}"}
        )


@router.get("/default-book", response_model=Book)
async def get_default_book() -> Book:
    """
    获取默认书籍配置
    """
    return Book()


@router.get("/genres")
async def get_genres():
    """
    获取支持的书籍类型及其参数
    """
    return {
        "genres": [
            {
                "code": genre.value,
                "demand_factor": GENRE_FACTORS[genre],
                "amazon_share": AMAZON_SHARE[genre],
            }
            for genre in Genre
        ]
    }
