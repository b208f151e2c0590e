from setuptools import setup

install_requires: list[str] = []

tests_require = ["pytest", "pytest-random-order"]

setup(
    name="typedmap",
    version="0.1",
    description="Type-checked access to values in decoded JSON",
    license="MIT",
    author="Eric Gjertsen",
    email="ericgj72@gmail.com",
    packages=[
        "typedmap",
        "typedmap.adapter",
        "typedmap.model",
        "typedmap.util",
    ],
    package_data={"typedmap": ["py.typed"]},
    python_requires=">=3.11",
    install_requires=install_requires,
    tests_require=tests_require,
    extras_require={"test": tests_require},  # to make pip happy
    entry_points={"console_scripts": ["typedmap = typedmap.__main__:main"]},
    zip_safe=False,  # to make mypy happy
)
