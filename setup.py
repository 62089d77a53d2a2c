import os.path

import setuptools

root_dir = os.path.abspath(os.path.dirname(__file__))
readme_file = os.path.join(root_dir, "README.rst")
with open(readme_file, encoding="utf-8") as f:
    long_description = f.read()

install_requires = [
    "cryptography>=42.0.0",
    "pyopenssl>=24.0.0",
]

setuptools.setup(
    name="rtctransport",
    version="1.0.0",
    description="ICE credentials, DTLS roles and transport descriptions for WebRTC",
    long_description=long_description,
    license="BSD",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    package_dir={"": "src"},
    packages=["rtctransport"],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require={"dev": ["coverage[toml]>=7.2.2", "pytest"]},
)
