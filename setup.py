"""Setup script for SyncTube Queue."""

from setuptools import setup, find_namespace_packages

setup(
    name="synctubequeue",
    version="0.1.0",
    description="Queue YouTube videos and playlists into SyncTube rooms",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["synctubequeue*"]),
    python_requires=">=3.10",
    install_requires=[
        "google-api-python-client>=2.0.0",
        "httpx>=0.24.0",
        "python-dotenv>=0.21.0",
        "tqdm>=4.0.0",
        "websockets>=14.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "synctubequeue=synctubequeue.cli:main",
        ]
    },
)
