from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e .[test]'
"""

install_requires = [
    "msgspec>=0.18",
    "numpy>=1.24",
]

extras_require = {
    "test": [
        "pytest>=7.0",
    ],
}

setup(
    name="bench-inputs",
    version="0.1.0",
    description="Input-driven microbenchmarks with baseline-subtracted throughput",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=install_requires,
    extras_require=extras_require,
)
