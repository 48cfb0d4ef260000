"""Locale Code Generator 主入口."""

import uvicorn
from api.app import create_app

# 创建FastAPI应用实例
app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=18000, reload=True)
