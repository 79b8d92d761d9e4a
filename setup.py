from setuptools import find_packages, setup

setup(
    name="emoji-cache-scanner",
    version="0.1.0",
    description="從聊天軟體與瀏覽器快取中找回表情貼圖",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=["Pillow>=10.0"],
    extras_require={"test": ["pytest>=7.0"]},
)
