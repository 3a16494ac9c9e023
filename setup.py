from setuptools import setup, find_packages

setup(
    name="aaset",
    version="0.1.0",
    description="A generic set container with bounded rendering and set algebra",
    author="aaset Development Team",
    author_email="",
    url="https://github.com/aaset/aaset",
    include_package_data=True,
    packages=find_packages(exclude=["tests", "scripts", "doc"]),
    package_dir={"aaset": "aaset"},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2",
        "pydantic-settings>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
)
