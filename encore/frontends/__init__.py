'''
Pieces of encore that talk to a real terminal
'''
