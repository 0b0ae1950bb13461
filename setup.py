"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='hostlink',
	author='Beth Kjos',
	author_email='kjosib@gmail.com',
	version='0.1.0',
	packages=['hostlink', "hostlink.adapters", ],
	package_data={
		'hostlink': ["data/*.txt"],
	},
	entry_points={
		'console_scripts': ["hostlink = hostlink.cmdline:main"],
	},
	license='MIT',
	description='Directory listings, ISO country codes, and text-file writes, shaped for a foreign runtime to call',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		"test": ["pytest"],
	},
)
