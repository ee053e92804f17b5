import sys

__version__ = '0.1.0.dev0'
__author__ = 'timecollector contributors'
__licence__ = 'GPL'
DEBUG = '--debug' in sys.argv
