import setuptools

setuptools.setup(
	name='minicombo',
	version='0.1.0',
	packages=[
		'minicombo',
	],
	python_requires='>=3.9',
	description='A minimal parser-combinator kit, with an arithmetic-expression parser built from it',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
