"""
Default word maps for context-aware transliteration.

Read-only; pass a different mapping to Transliterator to replace them.
"""

from types import MappingProxyType

KOREAN_WORDS = MappingProxyType({
    # Greetings
    '안녕하세요': 'annyeonghaseyo',
    '안녕히 가세요': 'annyeonghi gaseyo',
    '안녕히 계세요': 'annyeonghi gyeseyo',
    '감사합니다': 'gamsahamnida',
    '고맙습니다': 'gomapseumnida',
    '죄송합니다': 'joesonghamnida',
    '미안합니다': 'mianhamnida',

    # Common phrases
    '네': 'ne',
    '아니요': 'aniyo',
    '괜찮아요': 'gwaenchanayo',
    '좋아요': 'johayo',
    '싫어요': 'silheoyo',
    '몰라요': 'mollayo',
    '알겠어요': 'algesseoyo',

    # Family
    '아버지': 'abeoji',
    '어머니': 'eomeoni',
    '형': 'hyeong',
    '누나': 'nuna',
    '오빠': 'oppa',
    '언니': 'eonni',
    '동생': 'dongsaeng',

    # Time
    '오늘': 'oneul',
    '어제': 'eoje',
    '내일': 'naeil',
    '아침': 'achim',
    '점심': 'jeomsim',
    '저녁': 'jeonyeok',
    '밤': 'bam',

    # Numbers
    '하나': 'hana',
    '둘': 'dul',
    '셋': 'set',
    '넷': 'net',
    '다섯': 'daseot',
    '여섯': 'yeoseot',
    '일곱': 'ilgop',
    '여덟': 'yeodeol',
    '아홉': 'ahop',
    '열': 'yeol',

    # Common objects
    '물': 'mul',
    '밥': 'bap',
    '김치': 'gimchi',
    '라면': 'ramyeon',
    '치킨': 'chikin',
    '맥주': 'maekju',
    '소주': 'soju',

    # Places
    '집': 'jip',
    '학교': 'hakgyo',
    '회사': 'hoesa',
    '병원': 'byeongwon',
    '시장': 'sijang',
    '공항': 'gonghang',
    '지하철': 'jihacheol',

    # Countries
    '한국': 'hanguk',
    '미국': 'miguk',
    '중국': 'jungguk',
    '일본': 'ilbon',
    '영국': 'yeongguk',
    '프랑스': 'peurangseu',
    '독일': 'dogil',
    '러시아': 'reosia',
})

HINDI_WORDS = MappingProxyType({
    # Greetings
    'नमस्ते': 'namaste',
    'नमस्कार': 'namaskar',
    'धन्यवाद': 'dhanyawad',
    'स्वागत': 'swagat',
    'अलविदा': 'alvida',

    # Time
    'आज': 'aaj',
    'कल': 'kal',
    'परसों': 'parson',
    'सुबह': 'subah',
    'शाम': 'shaam',
    'रात': 'raat',

    # Family
    'माता': 'mata',
    'पिता': 'pita',
    'भाई': 'bhai',
    'बहन': 'bahan',
    'पत्नी': 'patni',
    'पति': 'pati',

    # Verbs
    'जाना': 'jaana',
    'आना': 'aana',
    'करना': 'karna',
    'होना': 'hona',
    'देना': 'dena',
    'लेना': 'lena',

    # Numbers
    'एक': 'ek',
    'दो': 'do',
    'तीन': 'teen',
    'चार': 'chaar',
    'पांच': 'paanch',
    'छह': 'chah',
    'सात': 'saat',
    'आठ': 'aath',
    'नौ': 'nau',
    'दस': 'das',

    # Colors
    'लाल': 'laal',
    'नीला': 'neela',
    'हरा': 'hara',
    'पीला': 'peela',
    'काला': 'kaala',
    'सफेद': 'safed',

    # Directions
    'उत्तर': 'uttar',
    'दक्षिण': 'dakshin',
    'पूर्व': 'purva',
    'पश्चिम': 'pashchim',

    # Common objects
    'पानी': 'paani',
    'रोटी': 'roti',
    'चावल': 'chawal',
    'दूध': 'doodh',
    'चाय': 'chai',
    'कॉफी': 'coffee',

    # Places
    'घर': 'ghar',
    'स्कूल': 'school',
    'अस्पताल': 'aspatal',
    'बाजार': 'bazaar',
    'रेलवे': 'railway',
    'हवाई अड्डा': 'hawai adda',
})
