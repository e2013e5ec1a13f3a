from setuptools import setup, find_packages


setup(
    name="ipformat",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic",
        "pydantic-settings",
    ],
)
