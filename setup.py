from setuptools import find_packages, setup


setup(
    name="file-access-server",
    version="0.1.0",
    description="MCP file tools (read, write, list) confined to a single allowed directory",
    packages=find_packages(include=["file_access", "file_access.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "file-access-server=file_access.cli:main",
        ]
    },
)
