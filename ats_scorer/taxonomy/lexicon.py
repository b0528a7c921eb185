from __future__ import annotations

# Tokens whose punctuation is part of the term. Everything else loses
# punctuation other than "-" and "+" during normalization.
TECH_PUNCTUATED_TERMS = frozenset({
    "c++", "c#", "f#", ".net", "asp.net", "ado.net", "vb.net",
    "node.js", "react.js", "next.js", "vue.js", "angular.js", "express.js",
    "nest.js", "nuxt.js", "three.js", "d3.js", "ember.js", "backbone.js",
    "ci/cd", "a/b", "ui/ux", "ux/ui", "tcp/ip", "pl/sql", "i/o",
    "monday.com",
})

# Single-letter languages survive the minimum-length filter.
SHORT_TECH_TERMS = frozenset({"r", "c"})

# Two-letter tokens that carry meaning. Any other two-letter token is noise
# for keyword extraction.
KNOWN_ACRONYMS = frozenset({
    "ai", "ui", "ux", "qa", "ml", "dl", "go", "js", "ts", "bi", "ci", "cd",
    "hr", "pr", "os", "db", "ar", "vr", "ios", "gcp", "aws", "sql", "api",
    "ba", "bs", "ma", "ms", "pm", "ip", "it", "k8s", "tf", "pg",
})

STOPWORDS = frozenset({
    # Articles, pronouns, determiners
    "a", "an", "the", "and", "or", "for", "with", "that", "this", "your", "you", "from", "into",
    "our", "are", "its", "his", "her", "their", "they", "them", "these", "those", "which",
    "what", "who", "whom", "whose", "where", "when", "how", "why", "each", "every", "both",
    "few", "many", "much", "some", "any", "all", "most", "other", "another", "such", "than",
    "then", "we", "us", "me", "my", "he", "she", "him", "it", "i", "yours", "ours",
    "of", "in", "on", "at", "to", "by", "as", "is", "be", "if", "so", "no", "not", "do",
    "am", "up", "per", "via", "etc", "eg", "ie", "youll", "youre", "were", "weve", "dont",
    # Common verbs / modals / auxiliaries
    "will", "must", "have", "has", "had", "can", "could", "would", "should", "shall", "may",
    "might", "been", "being", "was", "did", "does", "also", "too", "very",
    "just", "only", "even", "still", "yet", "already", "always", "never", "often", "well",
    # Prepositions / conjunctions
    "but", "nor", "about", "above", "after", "before", "between", "during", "under",
    "over", "through", "once", "until", "while", "since", "because", "although", "though",
    "whether", "either", "neither", "here", "there", "again", "further", "within", "across",
    "including", "include", "includes", "plus",
    # Generic verbs that are never skills
    "get", "got", "make", "made", "take", "took", "give", "gave", "come", "came", "find",
    "found", "keep", "kept", "let", "put", "say", "said", "tell", "told", "know", "knew",
    "think", "thought", "see", "saw", "want", "like", "need", "help", "try", "start",
    "show", "hear", "play", "run", "move", "live", "believe", "bring", "happen",
    "set", "become", "leave", "feel", "seem", "look", "turn", "call", "join",
    "love", "enjoy", "best", "new", "own", "back", "way", "long", "right",
    "around", "doing", "goes", "makes", "possible", "able", "sure", "real",
    "along", "based", "open", "used", "means", "different", "less", "more",
    "work", "working", "works", "use", "using",
})

# JD filler that is not a stopword in a job title ("Senior Backend Engineer")
# but never makes a useful keyword.
LOW_SIGNAL_TERMS = frozenset({
    "role", "roles", "team", "teams", "company", "companies", "candidate", "candidates",
    "position", "job", "jobs", "opportunity", "responsibilities", "responsibility",
    "required", "requirement", "requirements", "requires", "preferred", "needed",
    "looking", "seeking", "ideal", "ability", "abilities", "skill", "skills",
    "experience", "experienced", "experiences", "years", "year", "months", "month",
    "day", "days", "week", "weeks", "knowledge", "understanding", "familiarity",
    "strong", "excellent", "good", "great", "solid", "proven", "nice", "bonus",
    "qualifications", "qualification", "minimum", "degree", "equivalent", "related",
    "field", "environment", "culture", "benefits", "salary", "offer", "apply",
    "senior", "junior", "lead", "principal", "staff", "mid", "level", "entry",
    "engineer", "engineers", "developer", "developers", "specialist", "associate",
    "ensure", "support", "provide", "various", "multiple", "range", "ideally",
})

TECH_SKILLS = frozenset({
    # Languages
    "python", "java", "javascript", "typescript", "c++", "c#", "f#", "ruby", "go", "rust",
    "php", "swift", "kotlin", "scala", "perl", "r", "c", "dart", "lua", "elixir", "haskell",
    "sql", "bash", "powershell", "matlab",
    # Frontend
    "react", "angular", "vue", "svelte", "nextjs", "html", "css", "sass",
    "tailwind css", "bootstrap", "webpack", "vite", "redux", "jquery",
    # Backend
    "node", "express", "django", "flask", "fastapi", "spring", "spring boot", "ruby on rails",
    "laravel", "dotnet", "nestjs", "graphql", "rest", "grpc", "microservices", "api",
    # Data stores
    "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "dynamodb", "cassandra",
    "sqlite", "oracle", "snowflake", "bigquery", "kafka", "rabbitmq", "neo4j",
    # Cloud / infrastructure
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "ansible", "jenkins",
    "ci/cd", "git", "github", "gitlab", "github actions", "linux", "helm", "serverless",
    # Data / ML
    "machine learning", "deep learning", "artificial intelligence", "natural language processing",
    "computer vision", "data analysis", "data science", "data engineering",
    "tensorflow", "pytorch", "scikit-learn", "pandas", "numpy", "spark", "airflow",
    "tableau", "power bi", "looker", "large language models",
    # Testing
    "pytest", "jest", "cypress", "selenium", "playwright", "junit",
    # Process / collaboration
    "agile", "scrum", "kanban", "jira", "confluence",
    # Design
    "figma", "sketch", "adobe", "photoshop", "illustrator", "indesign",
    # Business tools
    "salesforce", "hubspot", "marketo", "sap", "workday", "servicenow", "quickbooks",
    "excel", "powerpoint", "microsoft office", "google workspace", "google analytics",
    "seo", "sem", "crm", "erp",
})

SOFT_SKILLS = frozenset({
    "leadership", "communication", "teamwork", "collaboration", "problem solving",
    "critical thinking", "time management", "adaptability", "creativity", "innovation",
    "attention to detail", "organization", "planning", "strategic thinking", "decision making",
    "conflict resolution", "negotiation", "presentation", "public speaking", "mentoring",
    "customer service", "relationship building", "stakeholder management", "cross-functional",
})

# Multi-word terms that are extracted as one unit instead of scattered words.
COMPOUND_TERMS = frozenset({
    "project management", "product management", "supply chain", "six sigma",
    "user experience", "user interface", "digital marketing", "email marketing",
    "content marketing", "social media", "marketing automation", "lead generation",
    "business intelligence", "data visualization", "data modeling", "data pipelines",
    "distributed systems", "system design", "unit testing", "test automation",
    "version control", "cloud computing", "information security", "financial modeling",
    "react native", "a/b testing", "rest api", "restful api", "restful apis",
})

# Requirements-line markers in a job description.
REQUIREMENT_MARKERS = (
    "required",
    "requirement",
    "must have",
    "must-have",
    "qualifications",
    "you have",
    "nice to have",
    "proficien",
)

EDUCATION_LEVELS: dict[str, int] = {
    "high school": 1,
    "ged": 1,
    "associate degree": 2,
    "associates degree": 2,
    "associate of": 2,
    "bachelor": 3,
    "bachelors": 3,
    "undergraduate degree": 3,
    "bs": 3,
    "ba": 3,
    "bsc": 3,
    "beng": 3,
    "btech": 3,
    "masters": 4,
    "master of": 4,
    "master degree": 4,
    "mba": 4,
    "ms": 4,
    "ma": 4,
    "msc": 4,
    "meng": 4,
    "mtech": 4,
    "phd": 5,
    "doctorate": 5,
    "doctoral": 5,
    "doctor of philosophy": 5,
}

# Bare degree words that are job titles in free text ("Scrum Master",
# "Sales Associate"). Only read from résumé education entries.
EDUCATION_ENTRY_LEVELS: dict[str, int] = {
    "associate": 2,
    "associates": 2,
    "master": 4,
}

# Skill names that are also everyday words. They only count as keywords on
# the job title or a requirements line.
AMBIGUOUS_TERMS = frozenset({"go", "r", "c", "rest", "express", "spring", "swift", "oracle"})
