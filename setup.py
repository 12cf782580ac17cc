from setuptools import setup, find_packages
#Grab the README.md for the long description
with open('README.md', 'r') as f:
    long_description = f.read()

def setup_package():
    setup(
        name = "fcp",
        version = '0.3.0',
        description = ("Multi threaded recursive file copying."),
        long_description = long_description,
        long_description_content_type = "text/markdown",
        license = "Public Domain",
        keywords = "file copy threads",
        packages=find_packages(exclude=['tests']),
        scripts=['bin/fcp'],
        zip_safe=False,
        python_requires='>=3.8',
        install_requires=['numpy', 'pandas', 'pyyaml'],
        extras_require={'test': ['pytest']},
        classifiers=[
            "Development Status :: 3 - Alpha",
            "Topic :: Utilities",
            "License :: Public Domain",
            'Programming Language :: Python :: 3',
        ],
    )

if __name__ == '__main__':
    setup_package()
