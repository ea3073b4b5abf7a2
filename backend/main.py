"""
KDP Forecast API Server

启动命令：
    uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kdp_forecast import __version__
from kdp_forecast.api import router

app = FastAPI(
    title="KDP Forecast API",
    description="自出版书籍组合 12 个月收益预测 API，支持定价、广告预算与平台分配模拟",
    version=__version__,
)

# CORS 配置，允许前端跨域访问
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(router, prefix="/api")


@app.get("/health")
async def health_check():
    """健康检查接口"""
    return {"status": "healthy", "service": "kdp-forecast-api"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)
