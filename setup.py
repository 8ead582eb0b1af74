"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='postfix-plus-plus',
	version='0.1.0',
	packages=['postfix'],
	entry_points={
		'console_scripts': ["postfix = postfix.cmdline:main"],
	},
	license='MIT',
	description='A reverse-Polish calculator whose stack and variables persist between invocations',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Scientific/Engineering :: Mathematics",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
