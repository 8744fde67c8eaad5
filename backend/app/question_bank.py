from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


LEVELS: List[str] = ["A1", "A2", "B1", "B2", "C1", "C2"]
OPTIONS_PER_QUESTION = 4

# Catalog order; question ids are "{index}-{level}" with a 1-based index into this list
COMPETENCIES: List[str] = [
	"Basic Greetings",
	"Basic Vocabulary",
	"Numbers and Time",
	"Family and Relationships",
	"Food and Drinks",
	"Articles and Grammar",
	"Verb Conjugations",
	"Prepositions and Cases",
	"Travel and Transportation",
	"Work and Professions",
	"Shopping and Money",
	"Weather and Seasons",
	"Health and Body",
	"Hobbies and Leisure",
	"Education and Learning",
	"Technology and Communication",
	"Culture and Traditions",
	"Complex Grammar",
	"Idiomatic Expressions",
	"Regional Differences",
	"Business German",
	"Advanced Cultural Concepts",
]


class Question(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: str
	text: str
	options: Tuple[str, ...] = Field(min_length=OPTIONS_PER_QUESTION, max_length=OPTIONS_PER_QUESTION)
	correct_answer: int = Field(ge=0)
	competency: str
	level: str

	@field_validator("level")
	@classmethod
	def check_level(cls, value: str) -> str:
		if value not in LEVELS:
			raise ValueError(f"level must be one of {LEVELS}")
		return value

	@model_validator(mode="after")
	def check_answer_index(self) -> "Question":
		if self.correct_answer >= len(self.options):
			raise ValueError(f"correct_answer {self.correct_answer} out of range for {self.id}")
		return self

	def option_text(self, index: Any) -> Optional[str]:
		if isinstance(index, bool) or not isinstance(index, int):
			return None
		if 0 <= index < len(self.options):
			return self.options[index]
		return None

	def public(self) -> Dict[str, Any]:
		# Learner-facing view; the answer key never leaves the server
		return {
			"id": self.id,
			"text": self.text,
			"options": list(self.options),
			"competency": self.competency,
			"level": self.level,
		}


class QuestionBank:
	"""Read-only question catalog indexed by id.

	Iteration and filtering keep catalog insertion order, which the step
	selector relies on when it takes the first two matches per competency.
	"""

	def __init__(self, questions: Iterable[Question], competencies: Optional[Sequence[str]] = None) -> None:
		self._questions: Tuple[Question, ...] = tuple(questions)
		self._by_id: Dict[str, Question] = {}
		for q in self._questions:
			if q.id in self._by_id:
				raise ValueError(f"duplicate question id: {q.id}")
			self._by_id[q.id] = q
		if competencies is None:
			seen: List[str] = []
			for q in self._questions:
				if q.competency not in seen:
					seen.append(q.competency)
			competencies = seen
		self._competencies: Tuple[str, ...] = tuple(competencies)

	@classmethod
	def from_rows(cls, rows: Iterable[Tuple[str, str, List[str], int, str, str]], competencies: Optional[Sequence[str]] = None) -> "QuestionBank":
		questions = [
			Question(id=qid, text=text, options=tuple(options), correct_answer=correct, competency=competency, level=level)
			for qid, text, options, correct, competency, level in rows
		]
		return cls(questions, competencies=competencies)

	def __len__(self) -> int:
		return len(self._questions)

	def __iter__(self) -> Iterator[Question]:
		return iter(self._questions)

	def __contains__(self, question_id: object) -> bool:
		return question_id in self._by_id

	@property
	def size(self) -> int:
		return len(self._questions)

	@property
	def competencies(self) -> Tuple[str, ...]:
		return self._competencies

	def get_by_id(self, question_id: str) -> Optional[Question]:
		return self._by_id.get(question_id)

	def filter_by_competency_and_levels(self, competency: str, levels: Iterable[str]) -> List[Question]:
		wanted = set(levels)
		return [q for q in self._questions if q.competency == competency and q.level in wanted]


_CATALOG: List[Tuple[str, str, List[str], int, str, str]] = [
	# Basic Greetings and Politeness
	('1-A1', 'How do you say "Hello" in German?', ['Guten Tag', 'Hallo', 'Auf Wiedersehen', 'Danke'], 1, 'Basic Greetings', 'A1'),
	('1-A2', 'What is the German word for "Thank you"?', ['Bitte', 'Entschuldigung', 'Danke', 'Tschüs'], 2, 'Basic Greetings', 'A2'),
	('1-B1', 'How do you politely ask for help in German?', ['Hilfe!', 'Können Sie mir helfen?', 'Ich brauche Hilfe', 'Hilf mir'], 1, 'Basic Greetings', 'B1'),
	('1-B2', 'Which is the most formal way to say goodbye?', ['Tschüs', 'Auf Wiedersehen', 'Bis bald', 'Ciao'], 1, 'Basic Greetings', 'B2'),
	('1-C1', 'What does "Entschuldigen Sie die Störung" mean?', ['Excuse the noise', 'Sorry for disturbing', 'Excuse me', 'I apologize'], 1, 'Basic Greetings', 'C1'),
	('1-C2', 'Which phrase shows the highest level of politeness when declining?', ['Nein, danke', 'Das kann ich nicht', 'Leider kann ich das nicht', 'Es tut mir außerordentlich leid, aber das ist mir leider nicht möglich'], 3, 'Basic Greetings', 'C2'),

	# Basic Vocabulary
	('2-A1', 'What is the German word for "water"?', ['das Brot', 'das Wasser', 'die Milch', 'der Saft'], 1, 'Basic Vocabulary', 'A1'),
	('2-A2', 'How do you say "I am hungry" in German?', ['Ich bin müde', 'Ich habe Durst', 'Ich habe Hunger', 'Ich bin kalt'], 2, 'Basic Vocabulary', 'A2'),
	('2-B1', 'What does "Fernseher" mean in English?', ['Radio', 'Computer', 'Television', 'Phone'], 2, 'Basic Vocabulary', 'B1'),
	('2-B2', 'Which word means "to improve"?', ['verschlechtern', 'verbessern', 'vergrößern', 'verkleinern'], 1, 'Basic Vocabulary', 'B2'),
	('2-C1', 'What is the meaning of "nachvollziehen"?', ['to follow behind', 'to comprehend/understand', 'to copy', 'to repeat'], 1, 'Basic Vocabulary', 'C1'),
	('2-C2', 'Which word best describes "extremely meticulous attention to detail"?', ['sorgfältig', 'genau', 'akribisch', 'ordentlich'], 2, 'Basic Vocabulary', 'C2'),

	# Numbers and Time
	('3-A1', 'How do you say "three" in German?', ['zwei', 'drei', 'vier', 'fünf'], 1, 'Numbers and Time', 'A1'),
	('3-A2', 'What time is "halb vier"?', ['3:30', '4:30', '4:00', '3:00'], 0, 'Numbers and Time', 'A2'),
	('3-B1', 'How do you say "quarter past eight"?', ['Viertel acht', 'Viertel nach acht', 'Viertel vor acht', 'Acht Viertel'], 1, 'Numbers and Time', 'B1'),
	('3-B2', 'What does "übermorgen" mean?', ['yesterday', 'tomorrow', 'the day after tomorrow', 'last week'], 2, 'Numbers and Time', 'B2'),
	('3-C1', 'Which expression means "in the foreseeable future"?', ['bald', 'in absehbarer Zeit', 'später', 'irgendwann'], 1, 'Numbers and Time', 'C1'),
	('3-C2', 'What does "alle Jubeljahre" mean?', ['every year', 'very rarely', 'during celebrations', 'in jubilee years'], 1, 'Numbers and Time', 'C2'),

	# Family and Relationships
	('4-A1', 'What is the German word for "mother"?', ['Vater', 'Mutter', 'Schwester', 'Tochter'], 1, 'Family and Relationships', 'A1'),
	('4-A2', 'How do you say "my brother" in German?', ['meine Schwester', 'mein Bruder', 'mein Vater', 'meine Mutter'], 1, 'Family and Relationships', 'A2'),
	('4-B1', 'What does "Schwiegermutter" mean?', ['sister-in-law', 'step-mother', 'mother-in-law', 'grandmother'], 2, 'Family and Relationships', 'B1'),
	('4-B2', 'Which term describes a close friendship?', ['Bekanntschaft', 'Freundschaft', 'enge Freundschaft', 'Kameradschaft'], 2, 'Family and Relationships', 'B2'),
	('4-C1', 'What does "verschwägert" mean?', ['related by marriage', 'divorced', 'engaged', 'adopted'], 0, 'Family and Relationships', 'C1'),
	('4-C2', 'Which expression means "to be estranged from family"?', ['mit der Familie streiten', 'von der Familie entfremdet sein', 'die Familie verlassen', 'sich von der Familie distanzieren'], 1, 'Family and Relationships', 'C2'),

	# Food and Drinks
	('5-A1', 'What is "Brot" in English?', ['butter', 'bread', 'cheese', 'meat'], 1, 'Food and Drinks', 'A1'),
	('5-A2', 'How do you say "I would like coffee" in German?', ['Ich trinke Kaffee', 'Ich möchte Kaffee', 'Ich habe Kaffee', 'Ich koche Kaffee'], 1, 'Food and Drinks', 'A2'),
	('5-B1', 'What does "Hauptgericht" mean?', ['appetizer', 'main course', 'dessert', 'side dish'], 1, 'Food and Drinks', 'B1'),
	('5-B2', 'Which phrase means "the bill, please"?', ['Die Rechnung, bitte', 'Das Geld, bitte', 'Die Bezahlung, bitte', 'Der Preis, bitte'], 0, 'Food and Drinks', 'B2'),
	('5-C1', 'What does "schmackhaft" mean?', ['expensive', 'tasty', 'healthy', 'fresh'], 1, 'Food and Drinks', 'C1'),
	('5-C2', 'Which term describes food that is "exquisitely prepared"?', ['gut gekocht', 'lecker zubereitet', 'raffiniert zubereitet', 'einfach gemacht'], 2, 'Food and Drinks', 'C2'),

	# Articles and Grammar Basics
	('6-A1', 'Which article goes with "Haus" (house)?', ['der', 'die', 'das', 'den'], 2, 'Articles and Grammar', 'A1'),
	('6-A2', 'What is the plural of "das Kind"?', ['die Kinds', 'die Kinder', 'die Kinde', 'das Kinder'], 1, 'Articles and Grammar', 'A2'),
	('6-B1', 'Which case is used after "mit" (with)?', ['Nominativ', 'Akkusativ', 'Dativ', 'Genitiv'], 2, 'Articles and Grammar', 'B1'),
	('6-B2', 'What is the correct past participle of "gehen"?', ['gegangen', 'gegehen', 'gegangt', 'gehangen'], 0, 'Articles and Grammar', 'B2'),
	('6-C1', 'Which modal verb expresses ability?', ['müssen', 'sollen', 'können', 'wollen'], 2, 'Articles and Grammar', 'C1'),
	('6-C2', 'What is the subjunctive II form of "haben" for "ich"?', ['hätte', 'habe', 'hatte', 'häbe'], 0, 'Articles and Grammar', 'C2'),

	# Verb Conjugations
	('7-A1', 'How do you conjugate "sein" (to be) for "ich"?', ['ich bin', 'ich bist', 'ich ist', 'ich sind'], 0, 'Verb Conjugations', 'A1'),
	('7-A2', 'What is the "du" form of "haben"?', ['du habe', 'du hast', 'du hat', 'du haben'], 1, 'Verb Conjugations', 'A2'),
	('7-B1', 'Which is the correct past tense of "ich gehe"?', ['ich ginge', 'ich ging', 'ich gegangen', 'ich bin gegangen'], 1, 'Verb Conjugations', 'B1'),
	('7-B2', 'What is the future tense of "er kommt"?', ['er wird kommen', 'er kommt werden', 'er gekommen wird', 'er hat kommen'], 0, 'Verb Conjugations', 'B2'),
	('7-C1', 'Which sentence uses the subjunctive I correctly?', ['Er sagt, er ist krank', 'Er sagt, er sei krank', 'Er sagt, er wäre krank', 'Er sagt, er würde krank sein'], 1, 'Verb Conjugations', 'C1'),
	('7-C2', 'What is the double infinitive construction with "lassen"?', ['Ich habe ihn gelassen kommen', 'Ich habe ihn kommen lassen', 'Ich habe ihn kommen gelassen', 'Ich lasse ihn gekommen haben'], 1, 'Verb Conjugations', 'C2'),

	# Prepositions and Cases
	('8-A1', 'Which preposition means "in"?', ['auf', 'in', 'an', 'über'], 1, 'Prepositions and Cases', 'A1'),
	('8-A2', 'Complete: "Ich wohne ___ Berlin" (I live in Berlin)', ['in', 'an', 'auf', 'bei'], 0, 'Prepositions and Cases', 'A2'),
	('8-B1', 'Which case does "wegen" require?', ['Nominativ', 'Akkusativ', 'Dativ', 'Genitiv'], 3, 'Prepositions and Cases', 'B1'),
	('8-B2', 'What is the dative form of "der große Mann"?', ['dem großen Mann', 'den großen Mann', 'der große Mann', 'des großen Mannes'], 0, 'Prepositions and Cases', 'B2'),
	('8-C1', 'Which preposition can take both accusative and dative?', ['für', 'mit', 'auf', 'von'], 2, 'Prepositions and Cases', 'C1'),
	('8-C2', 'In "Er arbeitet des Geldes wegen", what case is used?', ['Nominativ', 'Akkusativ', 'Dativ', 'Genitiv'], 3, 'Prepositions and Cases', 'C2'),

	# Travel and Transportation
	('9-A1', 'What is "Zug" in English?', ['bus', 'car', 'train', 'plane'], 2, 'Travel and Transportation', 'A1'),
	('9-A2', 'How do you ask "Where is the train station?"', ['Wie ist der Bahnhof?', 'Wo ist der Bahnhof?', 'Was ist der Bahnhof?', 'Wann ist der Bahnhof?'], 1, 'Travel and Transportation', 'A2'),
	('9-B1', 'What does "umsteigen" mean?', ['to get on', 'to get off', 'to change trains', 'to buy tickets'], 2, 'Travel and Transportation', 'B1'),
	('9-B2', 'Which phrase means "the flight is delayed"?', ['Der Flug ist pünktlich', 'Der Flug ist verspätet', 'Der Flug ist abgesagt', 'Der Flug ist früh'], 1, 'Travel and Transportation', 'B2'),
	('9-C1', 'What does "eine Rundreise machen" mean?', ['to take a one-way trip', 'to go on a round trip', 'to travel by round route', 'to make a circular journey'], 1, 'Travel and Transportation', 'C1'),
	('9-C2', 'Which expression means "to travel at someone else\'s expense"?', ['auf eigene Kosten reisen', 'auf fremde Rechnung reisen', 'kostenlos reisen', 'billig reisen'], 1, 'Travel and Transportation', 'C2'),

	# Work and Professions
	('10-A1', 'What is "Lehrer" in English?', ['student', 'teacher', 'doctor', 'lawyer'], 1, 'Work and Professions', 'A1'),
	('10-A2', 'How do you say "I work in an office"?', ['Ich arbeite im Büro', 'Ich wohne im Büro', 'Ich gehe ins Büro', 'Ich bin im Büro'], 0, 'Work and Professions', 'A2'),
	('10-B1', 'What does "Vollzeit" mean?', ['part-time', 'full-time', 'overtime', 'free time'], 1, 'Work and Professions', 'B1'),
	('10-B2', 'Which phrase means "to apply for a job"?', ['einen Job suchen', 'sich um einen Job bewerben', 'einen Job haben', 'einen Job verlieren'], 1, 'Work and Professions', 'B2'),
	('10-C1', 'What does "sich beruflich weiterbilden" mean?', ['to change careers', 'to retire', 'to pursue professional development', 'to work harder'], 2, 'Work and Professions', 'C1'),
	('10-C2', 'Which term describes "a highly specialized field of expertise"?', ['Fachgebiet', 'Spezialgebiet', 'Fachbereich', 'hochspezialisiertes Fachgebiet'], 3, 'Work and Professions', 'C2'),

	# Shopping and Money
	('11-A1', 'How do you ask "How much does it cost?"', ['Wie viel kostet das?', 'Was kostet das?', 'Wo kostet das?', 'Wann kostet das?'], 0, 'Shopping and Money', 'A1'),
	('11-A2', 'What is the German word for "expensive"?', ['billig', 'teuer', 'kostenlos', 'preiswert'], 1, 'Shopping and Money', 'A2'),
	('11-B1', 'How do you say "Can I pay with card?"', ['Kann ich mit Karte zahlen?', 'Kann ich Karte bezahlen?', 'Darf ich Karte nehmen?', 'Soll ich mit Karte zahlen?'], 0, 'Shopping and Money', 'B1'),
	('11-B2', 'What does "Sonderangebot" mean?', ['special order', 'special offer', 'special delivery', 'special service'], 1, 'Shopping and Money', 'B2'),
	('11-C1', 'Which phrase means "good value for money"?', ['gutes Geld', 'guter Preis', 'gutes Preis-Leistungs-Verhältnis', 'günstig'], 2, 'Shopping and Money', 'C1'),
	('11-C2', 'What does "in finanzieller Schieflage sein" mean?', ['to be financially stable', 'to be in financial difficulties', 'to be wealthy', 'to be financially independent'], 1, 'Shopping and Money', 'C2'),

	# Weather and Seasons
	('12-A1', 'What is "Sonne" in English?', ['moon', 'sun', 'star', 'cloud'], 1, 'Weather and Seasons', 'A1'),
	('12-A2', 'How do you say "It is raining"?', ['Es schneit', 'Es regnet', 'Es ist kalt', 'Es ist warm'], 1, 'Weather and Seasons', 'A2'),
	('12-B1', 'What does "bewölkt" mean?', ['sunny', 'cloudy', 'windy', 'foggy'], 1, 'Weather and Seasons', 'B1'),
	('12-B2', 'Which phrase describes very hot weather?', ['Es ist warm', 'Es ist heiß', 'Es ist glühend heiß', 'Es ist sonnig'], 2, 'Weather and Seasons', 'B2'),
	('12-C1', 'What does "ein Wetterumschwung" mean?', ['weather forecast', 'weather change', 'weather report', 'weather station'], 1, 'Weather and Seasons', 'C1'),
	('12-C2', 'Which expression describes "unpredictable weather"?', ['schlechtes Wetter', 'unbeständiges Wetter', 'launisches Wetter', 'wechselhaftes Wetter'], 2, 'Weather and Seasons', 'C2'),

	# Health and Body Parts
	('13-A1', 'What is "Kopf" in English?', ['hand', 'foot', 'head', 'arm'], 2, 'Health and Body', 'A1'),
	('13-A2', 'How do you say "I have a headache"?', ['Ich habe Kopfschmerzen', 'Mein Kopf tut weh', 'Ich bin krank', 'Ich habe Schmerzen'], 0, 'Health and Body', 'A2'),
	('13-B1', 'What does "Termin beim Arzt" mean?', ['hospital visit', 'doctor appointment', 'medical exam', 'health check'], 1, 'Health and Body', 'B1'),
	('13-B2', 'Which phrase means "to recover from illness"?', ['krank werden', 'sich erholen', 'gesund werden', 'sich von einer Krankheit erholen'], 3, 'Health and Body', 'B2'),
	('13-C1', 'What does "chronische Beschwerden" mean?', ['acute pain', 'chronic complaints', 'temporary discomfort', 'severe symptoms'], 1, 'Health and Body', 'C1'),
	('13-C2', 'Which term describes "a comprehensive medical examination"?', ['Untersuchung', 'gründliche Untersuchung', 'umfassende medizinische Untersuchung', 'Gesundheitscheck'], 2, 'Health and Body', 'C2'),

	# Hobbies and Leisure
	('14-A1', 'What is "Sport" in English?', ['game', 'sport', 'play', 'fun'], 1, 'Hobbies and Leisure', 'A1'),
	('14-A2', 'How do you say "I like reading"?', ['Ich lese gern', 'Ich mag lesen', 'Ich lese Bücher', 'Ich kann lesen'], 0, 'Hobbies and Leisure', 'A2'),
	('14-B1', 'What does "Freizeit" mean?', ['free time', 'work time', 'school time', 'break time'], 0, 'Hobbies and Leisure', 'B1'),
	('14-B2', 'Which phrase means "to pursue a hobby seriously"?', ['ein Hobby haben', 'ein Hobby ernst nehmen', 'sich einem Hobby widmen', 'ein Hobby intensiv betreiben'], 3, 'Hobbies and Leisure', 'B2'),
	('14-C1', 'What does "sich entspannen" mean?', ['to exercise', 'to work', 'to relax', 'to concentrate'], 2, 'Hobbies and Leisure', 'C1'),
	('14-C2', 'Which expression describes "an all-consuming passion"?', ['große Leidenschaft', 'starkes Interesse', 'alles verschlingende Leidenschaft', 'tiefe Hingabe'], 2, 'Hobbies and Leisure', 'C2'),

	# Education and Learning
	('15-A1', 'What is "Schule" in English?', ['university', 'school', 'college', 'class'], 1, 'Education and Learning', 'A1'),
	('15-A2', 'How do you say "I am a student"?', ['Ich bin Student', 'Ich bin Schüler', 'Ich lerne', 'Ich studiere'], 0, 'Education and Learning', 'A2'),
	('15-B1', 'What does "Prüfung" mean?', ['lesson', 'exam', 'homework', 'grade'], 1, 'Education and Learning', 'B1'),
	('15-B2', 'Which phrase means "to pass an exam"?', ['eine Prüfung machen', 'eine Prüfung bestehen', 'eine Prüfung haben', 'eine Prüfung schreiben'], 1, 'Education and Learning', 'B2'),
	('15-C1', 'What does "sich weiterbilden" mean?', ['to continue studying', 'to pursue continuing education', 'to advance in education', 'to improve skills'], 1, 'Education and Learning', 'C1'),
	('15-C2', 'Which term describes "academic excellence"?', ['gute Noten', 'Erfolg im Studium', 'akademische Spitzenleistung', 'hohe Bildung'], 2, 'Education and Learning', 'C2'),

	# Technology and Communication
	('16-A1', 'What is "Computer" in German?', ['Komputer', 'Computer', 'Rechner', 'Maschine'], 1, 'Technology and Communication', 'A1'),
	('16-A2', 'How do you say "I send an email"?', ['Ich schicke eine E-Mail', 'Ich bekomme eine E-Mail', 'Ich lese eine E-Mail', 'Ich öffne eine E-Mail'], 0, 'Technology and Communication', 'A2'),
	('16-B1', 'What does "herunterladen" mean?', ['to upload', 'to download', 'to delete', 'to save'], 1, 'Technology and Communication', 'B1'),
	('16-B2', 'Which phrase means "to be online"?', ['am Computer sein', 'im Internet sein', 'online sein', 'connected sein'], 2, 'Technology and Communication', 'B2'),
	('16-C1', 'What does "digitalisieren" mean?', ['to make digital', 'to digitize', 'to computerize', 'to modernize'], 1, 'Technology and Communication', 'C1'),
	('16-C2', 'Which term describes "cutting-edge technology"?', ['neue Technologie', 'moderne Technologie', 'fortschrittliche Technologie', 'Spitzentechnologie'], 3, 'Technology and Communication', 'C2'),

	# Culture and Traditions
	('17-A1', 'What is "Weihnachten" in English?', ['Easter', 'Christmas', 'Birthday', 'New Year'], 1, 'Culture and Traditions', 'A1'),
	('17-A2', 'When do Germans celebrate Oktoberfest?', ['October', 'September/October', 'November', 'August'], 1, 'Culture and Traditions', 'A2'),
	('17-B1', 'What is a "Gymnasium" in the German education system?', ['elementary school', 'middle school', 'academic high school', 'university'], 2, 'Culture and Traditions', 'B1'),
	('17-B2', 'What does "Gemütlichkeit" represent in German culture?', ['efficiency', 'punctuality', 'coziness and warmth', 'formality'], 2, 'Culture and Traditions', 'B2'),
	('17-C1', 'What is the significance of "Karneval" in German culture?', ['harvest festival', 'pre-Lenten celebration', 'summer festival', 'religious holiday'], 1, 'Culture and Traditions', 'C1'),
	('17-C2', 'Which concept represents the German approach to life-work balance?', ['Arbeitsmoral', 'Leistungsgesellschaft', 'Work-Life-Balance', 'Feierabend-Kultur'], 3, 'Culture and Traditions', 'C2'),

	# Complex Grammar Structures
	('18-A1', 'Which word order is correct: "Ich __ morgen nach Berlin"?', ['fahre', 'nach Berlin fahre', 'morgen fahre', 'fahren'], 0, 'Complex Grammar', 'A1'),
	('18-A2', 'Where does the verb go in: "Morgen __ ich nach Hause"?', ['first position', 'second position', 'third position', 'last position'], 1, 'Complex Grammar', 'A2'),
	('18-B1', 'Which conjunction requires verb at the end: "Ich gehe nach Hause, __ ich müde bin"?', ['und', 'aber', 'weil', 'denn'], 2, 'Complex Grammar', 'B1'),
	('18-B2', 'What is the passive voice of "Der Mann liest das Buch"?', ['Das Buch wird gelesen', 'Das Buch liest sich', 'Das Buch ist gelesen', 'Das Buch wurde gelesen'], 0, 'Complex Grammar', 'B2'),
	('18-C1', 'Which sentence uses the subjunctive correctly for indirect speech?', ['Er sagte, er ist krank', 'Er sagte, er sei krank', 'Er sagte, er wäre krank', 'Er sagte, dass er krank ist'], 1, 'Complex Grammar', 'C1'),
	('18-C2', 'What is the correct use of "würde" + infinitive?', ['Conditional mood replacement', 'Future tense', 'Past tense', 'Present perfect'], 0, 'Complex Grammar', 'C2'),

	# Idiomatic Expressions
	('19-A1', 'What does "Wie geht\'s?" mean?', ['Where are you going?', 'How are you?', 'What are you doing?', 'Who are you?'], 1, 'Idiomatic Expressions', 'A1'),
	('19-A2', 'What does "Alles Gute!" mean?', ['Everything good!', 'All the best!', 'Very good!', 'Good everything!'], 1, 'Idiomatic Expressions', 'A2'),
	('19-B1', 'What does "Das ist mir Wurst" mean?', ['I like sausage', 'I don\'t care', 'That\'s food to me', 'I\'m hungry'], 1, 'Idiomatic Expressions', 'B1'),
	('19-B2', 'What does "Die Daumen drücken" mean?', ['to press thumbs', 'to keep fingers crossed', 'to be nervous', 'to squeeze hands'], 1, 'Idiomatic Expressions', 'B2'),
	('19-C1', 'What does "Das ist nicht mein Bier" mean?', ['That\'s not my beer', 'That\'s not my business', 'I don\'t drink', 'I don\'t like that'], 1, 'Idiomatic Expressions', 'C1'),
	('19-C2', 'What does "Jemandem einen Bären aufbinden" mean?', ['to tie a bear to someone', 'to tell tall tales', 'to give someone a pet', 'to create a burden'], 1, 'Idiomatic Expressions', 'C2'),

	# Regional Differences
	('20-A1', 'How do you say "bread roll" in Northern Germany?', ['Brötchen', 'Semmel', 'Schrippe', 'Wecken'], 0, 'Regional Differences', 'A1'),
	('20-A2', 'What do they call "bread roll" in Bavaria?', ['Brötchen', 'Semmel', 'Schrippe', 'Wecken'], 1, 'Regional Differences', 'A2'),
	('20-B1', 'Which greeting is typical for Bavaria?', ['Moin', 'Servus', 'Tschüs', 'Hallo'], 1, 'Regional Differences', 'B1'),
	('20-B2', 'What does "Moin" mean in Northern Germany?', ['Good morning only', 'Hello (any time)', 'Goodbye', 'Good evening'], 1, 'Regional Differences', 'B2'),
	('20-C1', 'Which is a distinctive Austrian German word for "January"?', ['Januar', 'Jänner', 'Januarius', 'Wintermonat'], 1, 'Regional Differences', 'C1'),
	('20-C2', 'What characterizes Swiss German compared to Standard German?', ['Only pronunciation differs', 'Completely different language', 'Significant vocabulary and grammar differences', 'Only formal differences'], 2, 'Regional Differences', 'C2'),

	# Business German
	('21-A1', 'How do you say "company" in German?', ['Kompanie', 'Firma', 'Geschäft', 'Betrieb'], 1, 'Business German', 'A1'),
	('21-A2', 'What is a formal way to start a business letter?', ['Hallo', 'Liebe Grüße', 'Sehr geehrte Damen und Herren', 'Guten Tag'], 2, 'Business German', 'A2'),
	('21-B1', 'What does "Termin" mean in business context?', ['deadline', 'appointment', 'contract', 'meeting room'], 1, 'Business German', 'B1'),
	('21-B2', 'Which phrase means "to schedule a meeting"?', ['ein Meeting haben', 'ein Meeting planen', 'ein Meeting anberaumen', 'ein Meeting besuchen'], 2, 'Business German', 'B2'),
	('21-C1', 'What does "Geschäftsführung" refer to?', ['business travel', 'business management/executive board', 'business plan', 'business ethics'], 1, 'Business German', 'C1'),
	('21-C2', 'Which term describes "hostile takeover"?', ['freundliche Übernahme', 'Unternehmenskauf', 'feindliche Übernahme', 'Fusion'], 2, 'Business German', 'C2'),

	# Advanced Cultural Concepts
	('22-A1', 'What is the German currency?', ['Mark', 'Euro', 'Pfund', 'Dollar'], 1, 'Advanced Cultural Concepts', 'A1'),
	('22-A2', 'Which is a famous German car brand?', ['Toyota', 'BMW', 'Ford', 'Peugeot'], 1, 'Advanced Cultural Concepts', 'A2'),
	('22-B1', 'What is "Bundestag"?', ['German president', 'German parliament', 'German court', 'German military'], 1, 'Advanced Cultural Concepts', 'B1'),
	('22-B2', 'What does "soziale Marktwirtschaft" mean?', ['social media marketing', 'social market economy', 'socialist economy', 'market socialism'], 1, 'Advanced Cultural Concepts', 'B2'),
	('22-C1', 'What is the concept of "Mitbestimmung" in German business?', ['self-determination', 'co-determination/worker participation', 'decision-making', 'management consultation'], 1, 'Advanced Cultural Concepts', 'C1'),
	('22-C2', 'Which philosophical concept is deeply rooted in German culture?', ['Pragmatismus', 'Existenzialismus', 'Bildung (self-cultivation through education)', 'Materialismus'], 2, 'Advanced Cultural Concepts', 'C2'),
]


question_bank = QuestionBank.from_rows(_CATALOG, competencies=COMPETENCIES)
