# services/ltti_engine/definitions.py
# Static definitions for the LTTI (LeToast Type Indicator) questionnaire.

from types import MappingProxyType

TOTAL_QUESTIONS = 120
QUESTIONS_PER_AXIS = 30
LIKERT_MIN = 1
LIKERT_MAX = 5

# --- Axis letter pairs ---
# First letter of each pair wins ties when deriving the code.
AXIS_LETTERS = MappingProxyType({
    "energy": ("I", "E"),
    "action": ("S", "T"),
    "cognition": ("R", "X"),
    "control": ("D", "C"),
})

OPPOSITE_LETTER = MappingProxyType({
    "I": "E", "E": "I",
    "S": "T", "T": "S",
    "R": "X", "X": "R",
    "D": "C", "C": "D",
})

# --- Question bank (120) ---
QUESTIONS = [
    # Axis 1: energy (I vs E)
    {"id": 1, "text": "J’aime trader seul, sans partager mes idées avec d’autres.", "axis": "energy", "target": "I"},
    {"id": 2, "text": "Je me sens plus confiant lorsque je partage mes trades avec une communauté.", "axis": "energy", "target": "E"},
    {"id": 3, "text": "Après plusieurs trades, j’ai besoin d’un moment seul pour me ressourcer.", "axis": "energy", "target": "I"},
    {"id": 4, "text": "Je me sens stimulé quand je parle de mes positions avec d’autres traders.", "axis": "energy", "target": "E"},
    {"id": 5, "text": "Je préfère lire et analyser en silence plutôt que discuter en direct.", "axis": "energy", "target": "I"},
    {"id": 6, "text": "Quand je gagne, j’ai envie de le dire tout de suite à quelqu’un.", "axis": "energy", "target": "E"},
    {"id": 7, "text": "Je suis à l’aise dans le fait d’être invisible sur le marché, sans reconnaissance.", "axis": "energy", "target": "I"},
    {"id": 8, "text": "J’ai besoin qu’on remarque mes réussites.", "axis": "energy", "target": "E"},
    {"id": 9, "text": "Je trouve que la solitude renforce ma lucidité.", "axis": "energy", "target": "I"},
    {"id": 10, "text": "Je trouve que l’énergie du groupe renforce mon engagement.", "axis": "energy", "target": "E"},
    {"id": 11, "text": "Quand je perds, je garde mes émotions pour moi.", "axis": "energy", "target": "I"},
    {"id": 12, "text": "Quand je gagne, j’ai tendance à l’exprimer bruyamment.", "axis": "energy", "target": "E"},
    {"id": 13, "text": "Mes proches savent rarement ce que j’ai ressenti après une journée de trading.", "axis": "energy", "target": "I"},
    {"id": 14, "text": "J’aime célébrer mes victoires avec d’autres.", "axis": "energy", "target": "E"},
    {"id": 15, "text": "J’intériorise mes frustrations sans en parler.", "axis": "energy", "target": "I"},
    {"id": 16, "text": "J’ai besoin de partager mes émotions, même négatives, après une perte.", "axis": "energy", "target": "E"},
    {"id": 17, "text": "Je garde mes pensées pour moi tant qu’elles ne sont pas structurées.", "axis": "energy", "target": "I"},
    {"id": 18, "text": "Je parle souvent à voix haute de ce que je ressens face au marché.", "axis": "energy", "target": "E"},
    {"id": 19, "text": "Je trouve qu’exprimer mes émotions brouille mon jugement.", "axis": "energy", "target": "I"},
    {"id": 20, "text": "Je trouve qu’exprimer mes émotions me libère et me clarifie.", "axis": "energy", "target": "E"},
    {"id": 21, "text": "Je préfère attendre avant de prendre une décision de trade.", "axis": "energy", "target": "I"},
    {"id": 22, "text": "J’aime être le premier à cliquer quand une opportunité se présente.", "axis": "energy", "target": "E"},
    {"id": 23, "text": "Je préfère laisser d’autres s’engager avant moi.", "axis": "energy", "target": "I"},
    {"id": 24, "text": "J’aime prendre les devants même si je n’ai pas toutes les infos.", "axis": "energy", "target": "E"},
    {"id": 25, "text": "Je me sens plus à l’aise dans une posture d’observateur.", "axis": "energy", "target": "I"},
    {"id": 26, "text": "Je me sens plus à l’aise dans une posture d’acteur direct.", "axis": "energy", "target": "E"},
    {"id": 27, "text": "Je préfère réfléchir longtemps avant d’agir.", "axis": "energy", "target": "I"},
    {"id": 28, "text": "Je préfère agir vite et réfléchir ensuite.", "axis": "energy", "target": "E"},
    {"id": 29, "text": "Je crois que la patience est une force.", "axis": "energy", "target": "I"},
    {"id": 30, "text": "Je crois que la vitesse est une force.", "axis": "energy", "target": "E"},
    # Axis 2: action (S vs T)
    {"id": 31, "text": "J’évite de trader si je ne suis pas certain.", "axis": "action", "target": "S"},
    {"id": 32, "text": "Je prends volontiers un trade même avec de l’incertitude.", "axis": "action", "target": "T"},
    {"id": 33, "text": "Je préfère passer à côté que d’entrer trop tôt.", "axis": "action", "target": "S"},
    {"id": 34, "text": "Je préfère entrer trop tôt que de passer à côté.", "axis": "action", "target": "T"},
    {"id": 35, "text": "Je préfère attendre plusieurs confirmations.", "axis": "action", "target": "S"},
    {"id": 36, "text": "Je préfère capturer l’opportunité rapidement quitte à me tromper.", "axis": "action", "target": "T"},
    {"id": 37, "text": "Je ressens du stress si je clique trop souvent.", "axis": "action", "target": "S"},
    {"id": 38, "text": "Je ressens du stress si je ne clique pas assez.", "axis": "action", "target": "T"},
    {"id": 39, "text": "Je trouve normal de trader peu souvent.", "axis": "action", "target": "S"},
    {"id": 40, "text": "Je trouve normal de trader très souvent.", "axis": "action", "target": "T"},
    {"id": 41, "text": "Je laisse souvent passer des trades par prudence.", "axis": "action", "target": "S"},
    {"id": 42, "text": "Je déteste laisser filer une opportunité.", "axis": "action", "target": "T"},
    {"id": 43, "text": "Je pense que peu de trades suffisent pour performer.", "axis": "action", "target": "S"},
    {"id": 44, "text": "Je pense qu’il faut être très actif pour performer.", "axis": "action", "target": "T"},
    {"id": 45, "text": "Je préfère filtrer au maximum les setups.", "axis": "action", "target": "S"},
    {"id": 46, "text": "Je préfère multiplier les setups pour ne rien rater.", "axis": "action", "target": "T"},
    {"id": 47, "text": "Je me sens frustré si je n’ai pas cliqué de la journée.", "axis": "action", "target": "T"},
    {"id": 48, "text": "Je me sens rassuré même avec zéro trade.", "axis": "action", "target": "S"},
    {"id": 49, "text": "J’ai l’impression que chaque opportunité ratée est une perte.", "axis": "action", "target": "T"},
    {"id": 50, "text": "J’ai l’impression que rater un trade ne change rien.", "axis": "action", "target": "S"},
    {"id": 51, "text": "J’ouvre rarement plus d’une position à la fois.", "axis": "action", "target": "S"},
    {"id": 52, "text": "J’ouvre souvent plusieurs positions en même temps.", "axis": "action", "target": "T"},
    {"id": 53, "text": "Je limite volontairement mes trades quotidiens.", "axis": "action", "target": "S"},
    {"id": 54, "text": "Je trade sans limite tant que le marché est actif.", "axis": "action", "target": "T"},
    {"id": 55, "text": "Je pense qu’un petit nombre de trades suffit.", "axis": "action", "target": "S"},
    {"id": 56, "text": "Je pense que plus j’enchaîne, mieux c’est.", "axis": "action", "target": "T"},
    {"id": 57, "text": "Je me sens en sécurité avec peu de clics.", "axis": "action", "target": "S"},
    {"id": 58, "text": "Je me sens excité avec beaucoup de clics.", "axis": "action", "target": "T"},
    {"id": 59, "text": "Je crois que la retenue est une qualité.", "axis": "action", "target": "S"},
    {"id": 60, "text": "Je crois que l’audace est une qualité.", "axis": "action", "target": "T"},
    # Axis 3: cognition (R vs X)
    {"id": 61, "text": "J’ai besoin de preuves chiffrées pour cliquer.", "axis": "cognition", "target": "R"},
    {"id": 62, "text": "Je clique souvent sur une impression forte.", "axis": "cognition", "target": "X"},
    {"id": 63, "text": "Je fais confiance aux statistiques.", "axis": "cognition", "target": "R"},
    {"id": 64, "text": "Je fais confiance à mon instinct.", "axis": "cognition", "target": "X"},
    {"id": 65, "text": "J’ai du mal à agir sans plan écrit.", "axis": "cognition", "target": "R"},
    {"id": 66, "text": "J’ai du mal à agir sans ressentir une conviction intérieure.", "axis": "cognition", "target": "X"},
    {"id": 67, "text": "Je me fie surtout aux indicateurs techniques.", "axis": "cognition", "target": "R"},
    {"id": 68, "text": "Je me fie surtout à l’ambiance du marché.", "axis": "cognition", "target": "X"},
    {"id": 69, "text": "Je préfère la logique froide.", "axis": "cognition", "target": "R"},
    {"id": 70, "text": "Je préfère l’intuition vive.", "axis": "cognition", "target": "X"},
    {"id": 71, "text": "Une perte n’affecte pas mon jugement.", "axis": "cognition", "target": "R"},
    {"id": 72, "text": "Une perte me bouleverse fortement.", "axis": "cognition", "target": "X"},
    {"id": 73, "text": "Je reste stable après un gain.", "axis": "cognition", "target": "R"},
    {"id": 74, "text": "Je suis exalté après un gain.", "axis": "cognition", "target": "X"},
    {"id": 75, "text": "J’arrive à rester neutre en toute circonstance.", "axis": "cognition", "target": "R"},
    {"id": 76, "text": "J’ai du mal à rester neutre face aux variations.", "axis": "cognition", "target": "X"},
    {"id": 77, "text": "Je crois que les émotions doivent être éteintes.", "axis": "cognition", "target": "R"},
    {"id": 78, "text": "Je crois que les émotions donnent de l’énergie.", "axis": "cognition", "target": "X"},
    {"id": 79, "text": "Je considère les pertes comme un coût normal.", "axis": "cognition", "target": "R"},
    {"id": 80, "text": "Je considère les pertes comme une blessure personnelle.", "axis": "cognition", "target": "X"},
    {"id": 81, "text": "J’aime analyser en détail les données chiffrées.", "axis": "cognition", "target": "R"},
    {"id": 82, "text": "J’aime me fier à mes ressentis face aux graphiques.", "axis": "cognition", "target": "X"},
    {"id": 83, "text": "Je prends du plaisir à construire des statistiques.", "axis": "cognition", "target": "R"},
    {"id": 84, "text": "Je prends du plaisir à lire le marché “à l’œil nu”.", "axis": "cognition", "target": "X"},
    {"id": 85, "text": "Je fais confiance aux modèles.", "axis": "cognition", "target": "R"},
    {"id": 86, "text": "Je fais confiance à mes sensations.", "axis": "cognition", "target": "X"},
    {"id": 87, "text": "Je préfère suranalyser plutôt que ressentir.", "axis": "cognition", "target": "R"},
    {"id": 88, "text": "Je préfère ressentir plutôt que suranalyser.", "axis": "cognition", "target": "X"},
    {"id": 89, "text": "Les chiffres m’apaisent.", "axis": "cognition", "target": "R"},
    {"id": 90, "text": "Les chiffres me fatiguent.", "axis": "cognition", "target": "X"},
    # Axis 4: control (D vs C)
    {"id": 91, "text": "Je respecte mon plan même quand c’est difficile.", "axis": "control", "target": "D"},
    {"id": 92, "text": "Je dévie souvent de mon plan.", "axis": "control", "target": "C"},
    {"id": 93, "text": "Je crois qu’une règle doit être respectée.", "axis": "control", "target": "D"},
    {"id": 94, "text": "Je crois qu’une règle peut être adaptée selon l’humeur.", "axis": "control", "target": "C"},
    {"id": 95, "text": "Je garde toujours mes stops fixes.", "axis": "control", "target": "D"},
    {"id": 96, "text": "Je déplace souvent mes stops.", "axis": "control", "target": "C"},
    {"id": 97, "text": "Je respecte mon risque par trade.", "axis": "control", "target": "D"},
    {"id": 98, "text": "Je dépasse souvent mon risque par trade.", "axis": "control", "target": "C"},
    {"id": 99, "text": "J’ai confiance dans mes règles.", "axis": "control", "target": "D"},
    {"id": 100, "text": "J’ai confiance dans mon instinct même contre les règles.", "axis": "control", "target": "C"},
    {"id": 101, "text": "Je tiens un journal de trading précis.", "axis": "control", "target": "D"},
    {"id": 102, "text": "Je ne tiens pas de journal.", "axis": "control", "target": "C"},
    {"id": 103, "text": "Je relis mes notes régulièrement.", "axis": "control", "target": "D"},
    {"id": 104, "text": "Je préfère improviser.", "axis": "control", "target": "C"},
    {"id": 105, "text": "J’aime planifier mes sessions.", "axis": "control", "target": "D"},
    {"id": 106, "text": "J’aime la spontanéité totale.", "axis": "control", "target": "C"},
    {"id": 107, "text": "Je relis mes erreurs passées.", "axis": "control", "target": "D"},
    {"id": 108, "text": "Je préfère oublier mes erreurs passées.", "axis": "control", "target": "C"},
    {"id": 109, "text": "Je suis organisé dans ma routine.", "axis": "control", "target": "D"},
    {"id": 110, "text": "Je suis désordonné dans ma routine.", "axis": "control", "target": "C"},
    {"id": 111, "text": "J’attends toujours la session prévue.", "axis": "control", "target": "D"},
    {"id": 112, "text": "Je peux cliquer à n’importe quel moment.", "axis": "control", "target": "C"},
    {"id": 113, "text": "Je crois que la discipline horaire est essentielle.", "axis": "control", "target": "D"},
    {"id": 114, "text": "Je crois que le timing n’a pas de règles.", "axis": "control", "target": "C"},
    {"id": 115, "text": "Je respecte mon calendrier.", "axis": "control", "target": "D"},
    {"id": 116, "text": "Je trade sans calendrier.", "axis": "control", "target": "C"},
    {"id": 117, "text": "J’ai besoin de structure.", "axis": "control", "target": "D"},
    {"id": 118, "text": "J’ai besoin de liberté.", "axis": "control", "target": "C"},
    {"id": 119, "text": "J’aime le trading ritualisé.", "axis": "control", "target": "D"},
    {"id": 120, "text": "J’aime le trading imprévisible.", "axis": "control", "target": "C"},
]

# --- Profiles (16) ---
# Keyed by derived code: S/O (action), I/E (energy), R/X (cognition), D/C (control).
# The action letter is displayed as S or O even though it is scored as S/T.
PROFILE_LABELS = MappingProxyType({
    # Freezers (SI**)
    "SIRD": {"title": "Freezer — Méthodique (SIRD)", "family": "Freezer", "tagline": "Rigueur froide, exécution posée."},
    "SIXD": {"title": "Freezer — Anxieux (SIXD)", "family": "Freezer", "tagline": "Vigilance extrême, fébrilité intérieure."},
    "SIRC": {"title": "Freezer — Analyste (SIRC)", "family": "Freezer", "tagline": "Surintellectualisation, hésitation chronique."},
    "SIXC": {"title": "Freezer — Chaotique (SIXC)", "family": "Freezer", "tagline": "Agitation sans direction, confusion glacée."},
    # Écureuils (OI**)
    "OIRD": {"title": "Écureuil — Discipliné (OIRD)", "family": "Écureuil", "tagline": "Routine forte, prudence élevée."},
    "OIXD": {"title": "Écureuil — Paniqué (OIXD)", "family": "Écureuil", "tagline": "Urgence permanente, sur-réactions."},
    "OIRC": {"title": "Écureuil — Prudent (OIRC)", "family": "Écureuil", "tagline": "Sélectif, souvent spectateur."},
    "OIXC": {"title": "Écureuil — Sauvage (OIXC)", "family": "Écureuil", "tagline": "Action impulsive, besoin d’intensité."},
    # Snipers (SE**)
    "SERD": {"title": "Sniper — Strict (SERD)", "family": "Sniper", "tagline": "Zéro improvisation, métronome intérieur."},
    "SEXD": {"title": "Sniper — Crispé (SEXD)", "family": "Sniper", "tagline": "Hyper‑tension, précision anxieuse."},
    "SERC": {"title": "Sniper — Rêveur (SERC)", "family": "Sniper", "tagline": "Vision large, scénarios imaginés."},
    "SEXC": {"title": "Sniper — Nerveux (SEXC)", "family": "Sniper", "tagline": "Réactivité extrême, agitation continue."},
    # Kamikazes (OE**)
    "OERD": {"title": "Kamikaze — Structuré (OERD)", "family": "Kamikaze", "tagline": "Assauts planifiés, énergie canalisée."},
    "OEXD": {"title": "Kamikaze — Nerveux (OEXD)", "family": "Kamikaze", "tagline": "Explosif, précipitation chronique."},
    "OERC": {"title": "Kamikaze — Euphorique (OERC)", "family": "Kamikaze", "tagline": "Ivresse des gains, cycles extrêmes."},
    "OEXC": {"title": "Kamikaze — Vengeur (OEXC)", "family": "Kamikaze", "tagline": "Revanche, escalades risquées."},
})
