from setuptools import find_packages, setup

setup(
  name="edkey",
  version="0.1.0",
  description="Ed25519 point arithmetic, keys and Diffie-Hellman in plain Python",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "colorama>=0.4",
    "pynacl>=1.4",
    "tqdm>=4.62",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  entry_points=dict(console_scripts=["edkey = edkey.cli.__main__:main"]),
)
