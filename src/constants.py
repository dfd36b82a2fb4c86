BUILTIN_NAMES = frozenset({"echo", "type", "pwd", "cd", "exit"})

# only recognized when they stand alone as a word
REDIRECT_OPERATORS = (">", "1>", ">>", "1>>", "2>", "2>>")

PROMPT = "$ "
PATH_SEP = ":"
