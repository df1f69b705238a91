import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    if not os.path.exists(README):
        return ""
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="prisma_to_pydantic",
    version="0.1.0",
    description="Generate pydantic models and enums from a Prisma datamodel",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Text Processing",
        "Intended Audience :: Developers",
    ],
    keywords="prisma dmmf pydantic code generation python enum template",
    license="MIT",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pydantic>=2.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "prisma_to_pydantic=prisma_to_pydantic.prisma_to_pydantic:prisma_to_pydantic",
            "prisma-pydantic-generator=prisma_to_pydantic.rpc:main",
        ],
    },
    include_package_data=True,
    package_data={
        "prisma_to_pydantic": ["templates/**/*.jinja2", "templates/python/*.jinja2"],
    },
    zip_safe=False,
)
