from setuptools import find_namespace_packages, setup

setup(
    name="post_renderer",
    version="0.1",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["common*", "config*", "models*", "page*", "renderer*"]),
    python_requires=">=3.11",
    install_requires=[
        "aiohttp>=3.9.0",
        "beautifulsoup4>=4.12.0",
        "pydantic>=2.5.0",
        "python-dotenv>=1.0.0",
        "aiofiles>=23.2.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0,<9",
            "pytest-asyncio>=0.23.0",
            "ruff>=0.1.9",
        ],
    },
    entry_points={
        "console_scripts": [
            "post-renderer=page.app:main",
        ],
    },
)
