""" Command-line interface """
