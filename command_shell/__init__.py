"""
Line-oriented command shell for driving a sequence interactively.
"""
