from setuptools import setup, find_packages

setup(
    name="stepquad",
    version="0.1.0",
    description="Fixed-step and adaptive-step trapezoid integration with a comparison benchmark",
    author="adamfilli",
    packages=find_packages(include=["stepquad", "stepquad.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["stepquad=stepquad.cli:main"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
