# python setup.py build_ext -i clean
import os
import sys

from Cython.Build import cythonize
from setuptools import Extension, setup

try:
    import numpy as np
except ImportError:
    raise RuntimeError(
        "NumPy is required to build this package. Please install it first."
    )

COMPILER_DIRECTIVES = {
    "language_level": 3,
    "boundscheck": False,
    "wraparound": False,
    "initializedcheck": False,
    "nonecheck": False,
    "cdivision": True,
    "profile": False,
}

NUMPY_C_API = [
    ("NPY_NO_DEPRECATED_API", "NPY_1_9_API_VERSION")
]

pyx_files = [
    ("alda.dheap.dheap", "alda/dheap/dheap.pyx"),
]


def create_extensions(pyx_files: list[tuple]) -> list[Extension]:
    """
    Create a Cython extension for every .pyx module.

    Parameters
    ----------
    pyx_files : list[tuple]
        Pairs of the dotted module name and the path of its .pyx source.

    Returns
    -------
    list[Extension]
        One extension per module, built against the NumPy headers.
    """
    extra_compile_args = [
        f"-D{name}={value}"
        for name, value in NUMPY_C_API
    ]
    if sys.platform != "win32":
        extra_compile_args.append("-O3")

    return [
        Extension(
            name=module_name,
            sources=[pyx_path],
            include_dirs=[np.get_include()],
            extra_compile_args=extra_compile_args,
            language="c"
        )
        for module_name, pyx_path in pyx_files
    ]


def main() -> None:
    """Main setup function for compiling"""
    files = [
        (name, path)
        for name, path in pyx_files
        if os.path.exists(path)
    ]

    if not files:
        raise RuntimeError("No .pyx files found to compile")

    setup(
        name="alda",
        version="0.1.0",
        description="d-ary min-heap priority queue as a Cython extension",
        python_requires=">=3.9",
        install_requires=["numpy"],
        extras_require={"test": ["pytest"]},
        ext_modules=cythonize(
            create_extensions(files),
            compiler_directives=COMPILER_DIRECTIVES,
            language_level=3
        ),
        packages=["alda", "alda.dheap"],
        package_data={"alda.dheap": ["*.pyi", "*.pyx"]},
        zip_safe=False
    )


if __name__ == "__main__":
    main()
