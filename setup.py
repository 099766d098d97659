# setup.py
from setuptools import setup, find_packages

setup(
    name="lynk-ai-engine",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "motor>=3.6.0",
        "pymongo>=4.9.2",
        "pydantic>=2.10.2",
        "pydantic-settings>=2.6.0",
        "anthropic>=0.32.0",
        "aiohttp>=3.10.0",
        "fastapi>=0.115.5",
    ],
    extras_require={
        "test": [
            "pytest>=8.3.3",
            "pytest-asyncio>=0.24.0",
            "httpx>=0.27.0",
        ]
    },
)
