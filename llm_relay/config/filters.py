"""Topic filter configuration (coding / DSA keywords)."""

from __future__ import annotations

ENV_RELAY_TOPIC_FILTER = "RELAY_TOPIC_FILTER"
ENV_RELAY_FILTER_MESSAGE = "RELAY_FILTER_MESSAGE"

DEFAULT_RELAY_TOPIC_FILTER = True

DEFAULT_RELAY_FILTER_MESSAGE = (
    "I appreciate your question! However, I'm specifically designed to help with coding and Data "
    "Structures & Algorithms (DSA) topics. Could you please ask me something related to programming, "
    "algorithms, or data structures? I'd be happy to help! 😊"
)

# Word characters for tokenization; keeps "c++", "c#" and "snake_case" whole.
TOPIC_TOKEN_PATTERN = r"[a-z0-9_+#]+"

# Longest keyword phrase, in tokens.
TOPIC_MAX_PHRASE_TOKENS = 3

CODING_KEYWORDS: tuple[str, ...] = (
    # Core programming concepts
    "code", "function", "variable", "constant", "parameter", "argument", "return",
    "loop", "for", "while", "do while", "foreach", "iteration", "break", "continue",
    "conditional", "if", "else", "switch", "case", "ternary", "operator",
    "program", "hey", "hello", "hi",
    # Data structures
    "data structure", "algorithm", "dsa", "array", "list", "string", "tuple",
    "linked list", "doubly linked list", "circular linked list", "stack", "queue",
    "deque", "heap", "priority queue", "tree", "binary tree", "binary search tree",
    "bst", "avl tree", "red black tree", "b tree", "trie", "graph", "directed graph",
    "undirected graph", "dag", "hash", "hash table", "hash map", "dictionary",
    "set", "matrix", "grid",
    # Algorithms
    "sort", "bubble sort", "selection sort", "insertion sort", "merge sort",
    "quick sort", "heap sort", "counting sort", "radix sort", "bucket sort",
    "search", "linear search", "binary search", "depth first search", "dfs",
    "breadth first search", "bfs", "dijkstra", "bellman ford", "floyd warshall",
    "kruskal", "prim", "topological sort", "dynamic programming", "dp",
    "greedy", "backtracking", "divide and conquer", "recursion", "memoization",
    "optimization", "complexity", "big o", "space complexity", "time complexity",
    "asymptotic", "amortized",
    # Programming languages
    "python", "javascript", "java", "cpp", "c++", "c", "csharp", "c#", "rust",
    "go", "golang", "ruby", "php", "swift", "kotlin", "typescript", "scala",
    "groovy", "perl", "r", "matlab", "lua", "haskell", "erlang", "clojure",
    # Object oriented programming
    "class", "object", "instance", "inheritance", "polymorphism", "encapsulation",
    "abstraction", "interface", "abstract", "method", "property", "attribute",
    "constructor", "destructor", "getter", "setter", "static", "final", "access modifier",
    "public", "private", "protected", "friend", "virtual", "override", "super",
    # Functional programming
    "functional", "lambda", "arrow function", "callback", "promise", "async",
    "await", "generator", "iterator", "map", "filter", "reduce", "fold",
    "pure function", "side effect", "immutable", "immutability", "closure",
    # Development and debugging
    "debug", "breakpoint", "debugger", "console", "log", "error", "exception",
    "try catch", "finally", "throw", "stack trace", "assertion", "unit test",
    "integration test", "testing", "mock", "stub", "patch", "coverage",
    # Syntax and compilation
    "syntax", "logic", "compile", "compiler", "interpreter", "bytecode",
    "ast", "parsing", "lexing", "token", "literal", "identifier", "keyword",
    "semicolon", "bracket", "brace", "syntax error", "runtime error",
    # Web development
    "html", "css", "dom", "api", "rest", "restful", "http", "https", "json",
    "xml", "yaml", "fetch", "ajax", "websocket", "framework", "library",
    "react", "vue", "angular", "node", "nodejs", "express", "flask", "django",
    "bootstrap", "tailwind", "webpack", "babel", "npm", "yarn", "pip", "maven",
    # Databases
    "database", "sql", "mysql", "postgresql", "mongodb", "redis", "nosql",
    "query", "select", "insert", "update", "delete", "join", "index",
    "primary key", "foreign key", "transaction", "orm", "normalization",
    # Version control
    "git", "github", "gitlab", "bitbucket", "commit", "push", "pull", "merge",
    "branch", "fork", "clone", "rebase", "stash", "diff", "conflict",
    # DevOps and deployment
    "docker", "kubernetes", "container", "ci", "cd", "jenkins", "deployment",
    "production", "staging", "environment", "server", "client", "cloud",
    "aws", "azure", "gcp", "heroku",
    # Coding platforms
    "leetcode", "hackerrank", "codeforces", "codewars", "geeksforgeeks",
    "stack overflow", "codepen", "replit",
    # Design and practices
    "design pattern", "solid", "dry", "kiss", "yagni", "refactor", "refactoring",
    "code review", "documentation", "comment", "clean code", "best practice",
    "convention", "style guide", "linter", "formatter", "prettier", "eslint",
)

__all__ = [
    "ENV_RELAY_TOPIC_FILTER",
    "ENV_RELAY_FILTER_MESSAGE",
    "DEFAULT_RELAY_TOPIC_FILTER",
    "DEFAULT_RELAY_FILTER_MESSAGE",
    "TOPIC_TOKEN_PATTERN",
    "TOPIC_MAX_PHRASE_TOKENS",
    "CODING_KEYWORDS",
]
