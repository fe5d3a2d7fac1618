from setuptools import setup, find_packages

setup(
    name="costlens",
    version="0.1.0",
    description="Azure Cost Analysis Dashboard - Summarize an exported usage-cost CSV",
    author="Yoshi Kondo",
    author_email="yoshi@example.com",
    url="https://github.com/yksanjo/costlens",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    install_requires=[
        "pandas>=2.1.0",
        "fastapi>=0.109.0",
        "uvicorn>=0.27.0",
        "python-multipart>=0.0.9",
        "pydantic>=2.5.0",
        "typer>=0.9.0",
        "rich>=13.7.0",
        "python-dotenv>=1.0.0",
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.26.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "costlens=costlens.cli:main",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
