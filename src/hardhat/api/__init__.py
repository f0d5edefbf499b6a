"""ASGI integration for hardhat pipelines (Starlette / FastAPI)."""
