from setuptools import setup

desc = '''\
Pixiv API request builders with an aiohttp transport.\
'''

setup(
    name="pxvapi",
    version="0.1.0",
    description=desc,
    author="KIodine",
    license="MIT",
    packages=["pxvapi"],
    python_requires=">=3.7",
    install_requires=[
        "aiohttp",
        "pytz",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False
)
