"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='robinson-types',
	author='Beth Kjos',
	author_email='kjosib@gmail.com',
	version='0.1.0',
	packages=['robinson', ],
	entry_points={
		'console_scripts': ["robinson = robinson.cmdline:main"],
	},
	license='MIT',
	description='Union-find type inference for a tiny expression language, named for J. Alan Robinson',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Compilers",
		"Topic :: Education",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
)
