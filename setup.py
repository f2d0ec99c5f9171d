from setuptools import setup, find_packages

if __name__ == '__main__':
    setup(
        name='geoLOSModel',
        version='0.1.0',
        author='Saif Aati',
        author_email='saif@caltech.edu, saifaati@gmail.com',
        description='Line-of-sight model core: attitude jitter filtering, precision correction and lunar projection',
        long_description=open('README.md').read(),
        long_description_content_type='text/markdown',
        platforms=['unix', 'linux', 'win64', 'osx'],
        classifiers=[
            'Programming Language :: Python :: 3.8',
        ],
        license='GNU General Public License v3 (GPLv3)',
        packages=find_packages(include=['geoLOSModel', 'geoLOSModel.*']),
        python_requires='>=3.8',
        zip_safe=False,
        install_requires=[
            'numpy',
            'scipy>=1.2',
            'pyyaml',
            'click',
        ],
        extras_require={
            'testing': [
                'pytest>=6.0',
                'pytest-cov>=2.0',
                'mypy>=0.910',
                'flake8>=3.9',
                'tox>=3.24',
            ],
        },
        package_data={
            'geoLOSModel': ['py.typed', 'geoCore/geoLOSBaseCfg/*.yaml'],
        },
        entry_points={
            'console_scripts': [
                'geolos=geoLOSModel.geoLOSModel_CLI.los_cli:cli',
            ],
        },
    )
