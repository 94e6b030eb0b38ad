from setuptools import setup, find_packages

setup(
    name="mongo-portals",
    version="1.0.0",
    packages=find_packages(include=["portals", "portals.*"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "pymongo",
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
            "mongomock",
        ],
    },
)
