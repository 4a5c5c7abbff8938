from setuptools import setup, find_packages

setup(
    name="teamhub_api",
    version="0.1.0",
    packages=find_packages(include=["teamhub", "teamhub.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.103.1",
        "uvicorn>=0.23.2",
        "pydantic>=2.3.0",
        "pydantic-settings>=2.0.3",
        "email-validator>=2.0.0",
        "python-jose>=3.3.0",
        "passlib>=1.7.4",
        "sqlalchemy>=2.0.20",
        "psycopg2-binary>=2.9.7",
        "loguru>=0.7.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.24.1",
        ],
    },
)
