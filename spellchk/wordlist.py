"""
Embedded bootstrap word list.

Used to build a small dictionary on first run, before a full word list has
been downloaded with ``spellchk dict download``.
"""

ENGLISH_WORDS = (
    # Articles, pronouns, prepositions
    'a', 'an', 'the', 'i', 'you', 'he', 'she', 'it', 'we', 'they', 'me', 'him', 'her', 'us', 'them',
    'my', 'your', 'his', 'its', 'our', 'their', 'mine', 'yours', 'hers', 'ours', 'theirs',
    'this', 'that', 'these', 'those', 'who', 'whom', 'whose', 'which', 'what', 'where', 'when', 'why', 'how',
    'in', 'on', 'at', 'to', 'for', 'with', 'by', 'from', 'of', 'about', 'into', 'through', 'during',
    'before', 'after', 'above', 'below', 'between', 'under', 'over', 'out', 'up', 'down', 'off',
    
    # Common verbs (expanded)
    'is', 'are', 'was', 'were', 'be', 'been', 'being', 'am',
    'have', 'has', 'had', 'having', 'do', 'does', 'did', 'doing', 'done',
    'will', 'would', 'shall', 'should', 'may', 'might', 'must', 'can', 'could',
    'say', 'said', 'says', 'saying', 'get', 'got', 'gets', 'getting', 'gotten',
    'make', 'made', 'makes', 'making', 'go', 'goes', 'went', 'going', 'gone',
    'know', 'knew', 'knows', 'knowing', 'known', 'think', 'thought', 'thinks', 'thinking',
    'take', 'took', 'takes', 'taking', 'taken', 'see', 'saw', 'sees', 'seeing', 'seen',
    'come', 'came', 'comes', 'coming', 'want', 'wanted', 'wants', 'wanting',
    'use', 'used', 'uses', 'using', 'find', 'found', 'finds', 'finding',
    'give', 'gave', 'gives', 'giving', 'given', 'tell', 'told', 'tells', 'telling',
    'work', 'worked', 'works', 'working', 'call', 'called', 'calls', 'calling',
    'try', 'tried', 'tries', 'trying', 'need', 'needed', 'needs', 'needing',
    'feel', 'felt', 'feels', 'feeling', 'become', 'became', 'becomes', 'becoming',
    'leave', 'left', 'leaves', 'leaving', 'put', 'puts', 'putting',
    'mean', 'meant', 'means', 'meaning', 'keep', 'kept', 'keeps', 'keeping',
    'let', 'lets', 'letting', 'begin', 'began', 'begins', 'beginning', 'begun',
    'seem', 'seemed', 'seems', 'seeming', 'help', 'helped', 'helps', 'helping',
    'show', 'showed', 'shows', 'showing', 'shown', 'hear', 'heard', 'hears', 'hearing',
    'play', 'played', 'plays', 'playing', 'run', 'ran', 'runs', 'running',
    'move', 'moved', 'moves', 'moving', 'live', 'lived', 'lives', 'living',
    'believe', 'believed', 'believes', 'believing', 'bring', 'brought', 'brings', 'bringing',
    'happen', 'happened', 'happens', 'happening', 'write', 'wrote', 'writes', 'writing', 'written',
    'provide', 'provided', 'provides', 'providing', 'sit', 'sat', 'sits', 'sitting',
    'stand', 'stood', 'stands', 'standing', 'lose', 'lost', 'loses', 'losing',
    'pay', 'paid', 'pays', 'paying', 'meet', 'met', 'meets', 'meeting',
    'include', 'included', 'includes', 'including', 'continue', 'continued', 'continues', 'continuing',
    'set', 'sets', 'setting', 'learn', 'learned', 'learns', 'learning', 'learnt',
    'change', 'changed', 'changes', 'changing', 'lead', 'led', 'leads', 'leading',
    'understand', 'understood', 'understands', 'understanding', 'watch', 'watched', 'watches', 'watching',
    'follow', 'followed', 'follows', 'following', 'stop', 'stopped', 'stops', 'stopping',
    'create', 'created', 'creates', 'creating', 'speak', 'spoke', 'speaks', 'speaking', 'spoken',
    'read', 'reads', 'reading', 'allow', 'allowed', 'allows', 'allowing',
    'add', 'added', 'adds', 'adding', 'spend', 'spent', 'spends', 'spending',
    'grow', 'grew', 'grows', 'growing', 'grown', 'open', 'opened', 'opens', 'opening',
    'walk', 'walked', 'walks', 'walking', 'win', 'won', 'wins', 'winning',
    'offer', 'offered', 'offers', 'offering', 'remember', 'remembered', 'remembers', 'remembering',
    'love', 'loved', 'loves', 'loving', 'consider', 'considered', 'considers', 'considering',
    'appear', 'appeared', 'appears', 'appearing', 'buy', 'bought', 'buys', 'buying',
    'wait', 'waited', 'waits', 'waiting', 'serve', 'served', 'serves', 'serving',
    'die', 'died', 'dies', 'dying', 'send', 'sent', 'sends', 'sending',
    'expect', 'expected', 'expects', 'expecting', 'build', 'built', 'builds', 'building',
    'stay', 'stayed', 'stays', 'staying', 'fall', 'fell', 'falls', 'falling', 'fallen',
    'cut', 'cuts', 'cutting', 'reach', 'reached', 'reaches', 'reaching',
    'kill', 'killed', 'kills', 'killing', 'remain', 'remained', 'remains', 'remaining',
    'suggest', 'suggested', 'suggests', 'suggesting', 'raise', 'raised', 'raises', 'raising',
    'pass', 'passed', 'passes', 'passing', 'sell', 'sold', 'sells', 'selling',
    'require', 'required', 'requires', 'requiring', 'report', 'reported', 'reports', 'reporting',
    'decide', 'decided', 'decides', 'deciding', 'pull', 'pulled', 'pulls', 'pulling',
    'describe', 'described', 'describes', 'describing', 'description', 'descriptions',
    'develop', 'developed', 'develops', 'developing', 'development', 'developments',
    'establish', 'established', 'establishes', 'establishing', 'establishment',
    'determine', 'determined', 'determines', 'determining', 'determination',
    'maintain', 'maintained', 'maintains', 'maintaining', 'maintenance',
    'perform', 'performed', 'performs', 'performing', 'performance',
    'support', 'supported', 'supports', 'supporting', 'supportable',
    'manage', 'managed', 'manages', 'managing', 'management', 'manager',
    'ensure', 'ensured', 'ensures', 'ensuring',
    'define', 'defined', 'defines', 'defining', 'definition', 'definitions',
    'identify', 'identified', 'identifies', 'identifying', 'identification',
    'review', 'reviewed', 'reviews', 'reviewing', 'reviewer',
    'complete', 'completed', 'completes', 'completing', 'completion',
    'document', 'documented', 'documents', 'documenting', 'documentation',
    
    # Common nouns
    'time', 'year', 'people', 'way', 'day', 'man', 'woman', 'child', 'children',
    'world', 'life', 'hand', 'part', 'place', 'case', 'week', 'company', 'system',
    'program', 'question', 'work', 'government', 'number', 'night', 'point', 'home', 'water',
    'room', 'mother', 'area', 'money', 'story', 'fact', 'month', 'lot', 'right',
    'study', 'book', 'eye', 'job', 'word', 'business', 'issue', 'side', 'kind',
    'head', 'house', 'service', 'friend', 'father', 'power', 'hour', 'game', 'line',
    'end', 'member', 'law', 'car', 'city', 'community', 'name', 'president', 'team',
    'minute', 'idea', 'kid', 'body', 'information', 'back', 'parent', 'face', 'others',
    'level', 'office', 'door', 'health', 'person', 'art', 'war', 'history', 'party',
    'result', 'change', 'morning', 'reason', 'research', 'girl', 'guy', 'moment', 'air',
    'teacher', 'force', 'education', 'foot', 'boy', 'age', 'policy', 'process', 'music',
    'market', 'sense', 'nation', 'plan', 'college', 'interest', 'death', 'experience', 'effect',
    'use', 'class', 'control', 'care', 'field', 'development', 'role', 'effort', 'rate',
    'heart', 'drug', 'show', 'leader', 'light', 'voice', 'wife', 'police', 'mind',
    'difference', 'period', 'value', 'building', 'action', 'authority', 'model', 'paper', 'data',
    
    # Common adjectives
    'good', 'new', 'first', 'last', 'long', 'great', 'little', 'own', 'other', 'old',
    'right', 'big', 'high', 'different', 'small', 'large', 'next', 'early', 'young', 'important',
    'few', 'public', 'bad', 'same', 'able', 'best', 'better', 'sure', 'free', 'true',
    'real', 'full', 'special', 'major', 'strong', 'possible', 'whole', 'clear', 'recent', 'certain',
    'personal', 'open', 'red', 'difficult', 'available', 'likely', 'short', 'single', 'low', 'hard',
    'past', 'local', 'main', 'current', 'national', 'natural', 'physical', 'final', 'general', 'environmental',
    'financial', 'blue', 'black', 'white', 'green', 'common', 'poor', 'happy', 'serious', 'ready',
    'simple', 'left', 'nice', 'late', 'less', 'complete', 'total', 'similar', 'hot', 'dead',
    
    # Common adverbs
    'not', 'just', 'also', 'very', 'often', 'however', 'too', 'usually', 'really', 'early',
    'never', 'always', 'sometimes', 'together', 'likely', 'simply', 'generally', 'instead', 'actually', 'already',
    'enough', 'especially', 'ever', 'quickly', 'probably', 'certainly', 'perhaps', 'finally', 'today', 'either',
    'exactly', 'ago', 'behind', 'recently', 'soon', 'thus', 'almost', 'directly', 'alone', 'actually',
    
    # Conjunctions and other
    'and', 'but', 'or', 'so', 'if', 'when', 'because', 'as', 'than', 'while',
    'although', 'whether', 'though', 'since', 'until', 'unless', 'nor', 'yet', 'both', 'either',
    'neither', 'each', 'every', 'all', 'any', 'some', 'no', 'most', 'more', 'only',
    'even', 'still', 'such', 'well', 'back', 'then', 'now', 'here', 'there', 'much',
    'many', 'few', 'several', 'own', 'same', 'another', 'around', 'away', 'yes', 'no',

    # Software and documentation
    'software', 'hardware', 'firmware', 'middleware', 'database', 'server', 'client',
    'api', 'apis', 'gui', 'cli', 'ui', 'ux', 'frontend', 'backend', 'fullstack',
    'algorithm', 'algorithms', 'codebase', 'repository', 'deployment', 'devops', 'cicd',
    'agile', 'scrum', 'kanban', 'waterfall', 'spiral', 'iterative', 'incremental',
    'cybersecurity', 'encryption', 'authentication', 'authorization', 'firewall', 'malware',
    'document', 'documentation', 'specification', 'procedure', 'instruction', 'manual',
    'drawing', 'schematic', 'diagram', 'flowchart', 'table', 'figure', 'appendix',
    'section', 'paragraph', 'clause', 'subclause', 'annex', 'attachment', 'exhibit',
    'revision', 'version', 'draft', 'final', 'approved', 'released', 'controlled',
    'acronym', 'acronyms', 'abbreviation', 'abbreviations', 'definition', 'definitions',
    'reference', 'references', 'bibliography', 'glossary', 'index', 'toc', 'lof', 'lot',
    'configure', 'configured', 'configures', 'configuring', 'configuration',
    'install', 'installed', 'installs', 'installing', 'installation',
    'implement', 'implemented', 'implements', 'implementing', 'implementation',
    'integrate', 'integrated', 'integrates', 'integrating', 'integration',
    'validate', 'validated', 'validates', 'validating', 'validation',
    'verify', 'verified', 'verifies', 'verifying', 'verification',
    'analyze', 'analyzed', 'analyzes', 'analyzing', 'analysis',
    'assess', 'assessed', 'assesses', 'assessing', 'assessment',
    'evaluate', 'evaluated', 'evaluates', 'evaluating', 'evaluation',
    'specify', 'specified', 'specifies', 'specifying', 'specification',
    'allocate', 'allocated', 'allocates', 'allocating', 'allocation',
    'derive', 'derived', 'derives', 'deriving', 'derivation',
    'decompose', 'decomposed', 'decomposes', 'decomposing', 'decomposition',
    'prioritize', 'prioritized', 'prioritizes', 'prioritizing', 'prioritization',
    'optimize', 'optimized', 'optimizes', 'optimizing', 'optimization',
    'coordinate', 'coordinated', 'coordinates', 'coordinating', 'coordination',
    'collaborate', 'collaborated', 'collaborates', 'collaborating', 'collaboration',
    'mitigate', 'mitigated', 'mitigates', 'mitigating', 'mitigation',
    'remediate', 'remediated', 'remediates', 'remediating', 'remediation',
    'facilitate', 'facilitated', 'facilitates', 'facilitating', 'facilitation',
    'utilize', 'utilized', 'utilizes', 'utilizing', 'utilization',
    'leverage', 'leveraged', 'leverages', 'leveraging',
    'streamline', 'streamlined', 'streamlines', 'streamlining',

    # Programming terms
    'function', 'functions', 'class', 'classes', 'method', 'methods', 'variable', 'variables',
    'string', 'strings', 'integer', 'integers', 'boolean', 'array', 'arrays', 'list', 'lists',
    'dictionary', 'dictionaries', 'object', 'objects', 'parameter', 'parameters', 'argument',
    'arguments', 'return', 'returns', 'import', 'imports', 'export', 'exports', 'async', 'await',
    'promise', 'callback', 'error', 'errors', 'exception', 'exceptions', 'test', 'tests', 'testing',
    'debug', 'compile', 'compiler', 'build', 'deploy', 'version', 'file', 'files', 'line', 'lines',
    'word', 'words', 'text', 'comment', 'comments', 'value', 'values', 'type', 'types', 'module',
    'modules', 'package', 'packages', 'library', 'code', 'input', 'output', 'default', 'option',
    'options', 'command', 'commands', 'check', 'checks', 'checked', 'checking', 'spell', 'spelling',
    'hello', 'world', 'example', 'examples', 'main', 'print', 'true', 'false', 'null', 'none',
)

MINIMAL_WORDS = (
    'the', 'be', 'to', 'of', 'and', 'a', 'in', 'that', 'have', 'i',
)


def get_basic_wordlist(language: str) -> list:
    """Return the embedded word list for ``language`` (English variants get the full list)."""
    if language.lower().startswith('en'):
        words = ENGLISH_WORDS
    else:
        words = MINIMAL_WORDS
    return sorted({w for w in words if ' ' not in w})
