from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "matplotlib>=3.7.0",
]

# Optional test dependencies
test_requirements = [
    "pytest>=7.0.0",
]

setup(
    name="contrast_color",
    version="0.1.0",
    description="Resolve readable text colors for arbitrary background colors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
