"""
Game constants for Trump Against Humanity.

This module contains all constant values used throughout the game,
including the phrase card and prompt catalogs, lobby states, game phases,
user-facing error messages, and configuration values.
"""

# Phrase cards dealt into player hands
CARDS = [
    # Classic Trump Phrases
    "the fake news media", "tremendous success", "very smart people", "believe me", "China",
    "the best deal ever", "crooked politicians", "beautiful phone call", "tremendous phone call",
    "perfect conversation", "witch hunt", "total disaster", "complete hoax", "rigged election",
    "stolen votes", "massive fraud", "incredible ratings", "record crowds", "standing ovation",

    # Political Figures & Nicknames
    "fake polls", "corrupt media", "radical left", "deep state", "swamp creatures",
    "establishment politicians", "career politicians", "sleepy Joe", "crazy Nancy", "shifty Schiff",
    "pencil neck", "low energy", "sad loser", "total lightweight", "third-rate politician",
    "nasty woman", "crooked Hillary", "little Marco", "lyin' Ted", "rocket man",
    "fire and fury", "nuclear button", "very stable genius", "covfefe", "alternative facts",

    # Campaign & Politics
    "tremendous crowds", "biggest inauguration", "perfect phone call", "no collusion", "total exoneration",
    "presidential harassment", "angry Democrats", "do-nothing Democrats", "radical socialist agenda",
    "America First", "Make America Great Again", "tremendous wall", "beautiful wall", "Mexico will pay",
    "trade war", "tariffs", "unfair trade deals", "renegotiated NAFTA", "incredible economy",

    # Economy & Military
    "best economy ever", "record unemployment", "booming stock market", "tremendous jobs", "beautiful factories",
    "incredible military", "rebuilt military", "Space Force", "tremendous generals", "my generals",
    "beautiful letter", "love letters", "perfect deal", "art of the deal", "tremendous negotiator",

    # New Trump Vocabulary - Business & Success
    "billion dollar empire", "luxury properties", "golden escalator", "tremendous wealth", "successful businessman",
    "incredible brand", "world-class hotels", "magnificent towers", "beautiful golf courses", "tremendous resorts",
    "five-star restaurants", "exclusive memberships", "premium locations", "spectacular views", "unmatched quality",
    "tremendous value", "incredible investments", "massive profits", "record-breaking sales", "outstanding performance",

    # New Trump Vocabulary - Media & Entertainment
    "reality TV star", "tremendous ratings", "number one show", "incredible viewership", "massive audience",
    "spectacular entertainment", "tremendous production", "award-winning performance", "incredible talent", "natural showman",
    "tremendous charisma", "incredible presence", "commanding performance", "spectacular delivery", "tremendous energy",
    "incredible passion", "outstanding leadership", "tremendous vision", "incredible determination", "unstoppable force",

    # New Trump Vocabulary - International Relations
    "tremendous allies", "incredible partnerships", "beautiful relationships", "perfect diplomacy", "outstanding negotiations",
    "tremendous respect", "incredible influence", "powerful presence", "commanding authority", "tremendous leadership",
    "incredible results", "outstanding achievements", "tremendous progress", "incredible breakthroughs", "spectacular success",
    "beautiful agreements", "perfect understanding", "tremendous cooperation", "incredible unity", "outstanding collaboration",

    # New Trump Vocabulary - Technology & Innovation
    "tremendous technology", "incredible innovation", "cutting-edge solutions", "revolutionary advances", "spectacular breakthroughs",
    "outstanding developments", "tremendous progress", "incredible achievements", "magnificent discoveries", "beautiful inventions",
    "tremendous capabilities", "incredible potential", "outstanding performance", "spectacular results", "tremendous efficiency",
    "incredible speed", "outstanding quality", "tremendous reliability", "incredible durability", "spectacular design",
    "fell in love", "tremendous respect", "incredible relationship", "perfect meeting", "historic summit",
    "tremendous progress", "incredible success", "total victory", "complete domination", "tremendous power",
    "incredible strength", "unmatched wisdom", "stable genius", "very good genes", "tremendous brain",
    "incredible memory", "perfect recall", "tremendous energy", "incredible stamina", "perfect health",
    "tremendous doctor", "incredible results", "perfect score",

    # South Park Style Trump Cards
    "member berries", "underpants gnomes", "Cartman's authority", "Kenny's deaths", "Stan's cynicism",
    "Kyle's lectures", "Randy's schemes", "Butters' innocence", "Towelie's wisdom", "Mr. Garrison's teaching",
    "Chef's advice", "Principal Victoria", "Mr. Mackey's guidance", "Timmy's enthusiasm", "Jimmy's comedy",

    # More Political Satire
    "tremendous tweets", "perfect grammar", "incredible spelling", "beautiful autocorrect", "tremendous typos",
    "incredible caps lock", "perfect punctuation", "tremendous hashtags", "incredible retweets", "beautiful mentions",
    "tremendous followers", "incredible engagement", "perfect timing", "tremendous virality", "incredible reach",

    # Business & Money
    "tremendous bankruptcy", "incredible debt", "perfect loans", "beautiful foreclosure", "tremendous audit",
    "incredible taxes", "perfect deductions", "tremendous write-offs", "incredible losses", "beautiful profits",
    "tremendous revenue", "incredible margins", "perfect cash flow", "tremendous assets", "incredible liabilities",

    # Food & Lifestyle
    "tremendous hamburgers", "incredible diet coke", "perfect fast food", "beautiful steaks", "tremendous ketchup",
    "incredible pizza", "perfect taco bowls", "tremendous chocolate cake", "incredible ice cream", "beautiful cookies",
    "tremendous coffee", "incredible energy drinks", "perfect supplements", "tremendous vitamins", "incredible protein",

    # Sports & Entertainment
    "tremendous golf", "incredible handicap", "perfect swing", "beautiful courses", "tremendous tournaments",
    "incredible scores", "perfect putts", "tremendous drives", "incredible accuracy", "beautiful technique",
    "tremendous wrestling", "incredible matches", "perfect moves", "beautiful entertainment", "tremendous crowds",

    # Technology & Social Media
    "tremendous algorithms", "incredible platforms", "perfect posts", "beautiful content", "tremendous engagement",
    "incredible metrics", "perfect analytics", "tremendous reach", "incredible influence", "beautiful branding",
    "tremendous marketing", "incredible advertising", "perfect campaigns", "tremendous ROI", "incredible conversion",

    # Weather & Natural Phenomena
    "tremendous hurricanes", "incredible storms", "perfect weather", "beautiful sunshine", "tremendous rain",
    "incredible snow", "perfect temperature", "tremendous wind", "incredible pressure", "beautiful clouds",
    "tremendous lightning", "incredible thunder", "perfect rainbow", "tremendous drought", "incredible flooding",

    # Animals & Nature
    "tremendous eagles", "incredible lions", "perfect tigers", "beautiful elephants", "tremendous sharks",
    "incredible dolphins", "perfect whales", "tremendous bears", "incredible wolves", "beautiful deer",
    "tremendous horses", "incredible dogs", "perfect cats", "tremendous birds", "incredible fish",

    # Random Trump-isms
    "tremendous covfefe", "incredible hamberders", "perfect smocking gun", "beautiful achomlishments", "tremendous unpresidented",
    "incredible bigly", "perfect yuge", "tremendous braggadocious", "incredible phenomenal", "beautiful fantastic",
    "tremendous spectacular", "incredible magnificent", "perfect extraordinary", "tremendous outstanding", "incredible exceptional",
]

# Prompt templates as (text, blanks); each {n} placeholder takes one card
PROMPTS = [
    # Classic Trump Scenarios
    ("Just had a {0} with {1}. They said {2}. Fake news!", 3),
    ("The {0} are totally {1}. We need {2} immediately!", 3),
    ("My {0} was {1}. Everyone knows it!", 2),
    ("I just made the {0} deal with {1}. {2} are going crazy!", 3),
    ("The {0} said I couldn't {1}, but I did it anyway. {2}!", 3),
    ("Nobody has ever seen {0} like this before. {1}!", 2),
    ("I told {0} that {1} was {2}. They agreed completely!", 3),
    ("The {0} are rigged! We need {1} to fix this mess!", 2),
    # Politics & Elections
    ("The polls show I'm winning by {0}! {1} can't believe it!", 2),
    ("I defeated {0} with {1}. Total landslide!", 2),
    ("The {0} are trying to steal the election with {1}!", 2),
    ("My rally had {0} people! {1} is fake news!", 2),
    ("I will drain the swamp of {0} and {1}!", 2),
    # Single Blank Prompts for Variety
    ("I am the {0} president in history!", 1),
    ("Nobody knows {0} better than me!", 1),
    ("I have the best {0}. Everyone says so!", 1),
    ("The {0} love me. Tremendous support!", 1),
    ("I will make {0} great again!", 1),
    ("My {0} is unmatched. Believe me!", 1),
    ("The {0} are out of control. Sad!", 1),
    ("I fixed {0} in record time!", 1),
    # More Business & Deals
    ("I negotiated {0} with {1}. They got {2}!", 3),
    ("My {0} empire is worth {1}. {2} are jealous!", 3),
    ("I bought {0} for {1} and sold it for {2}. Art of the deal!", 3),
    ("The {0} wanted {1}, but I gave them {2} instead!", 3),
    ("I fired {0} because of {1}. {2} was the last straw!", 3),
    # International Relations
    ("I met with {0} about {1}. We discussed {2}!", 3),
    ("The {0} called me about {1}. I told them {2}!", 3),
    ("I solved {0} with {1}. {2} said it was impossible!", 3),
    ("The summit with {0} was {1}. We achieved {2}!", 3),
    ("I wrote a {0} letter to {1} about {2}!", 3),
    # Media & Social Media
    ("I tweeted about {0} and {1} went crazy! {2}!", 3),
    ("The {0} reported {1}, but the truth is {2}!", 3),
    ("My {0} post got {1} likes! {2} are seething!", 3),
    ("I exposed {0} for {1}. {2} can't handle the truth!", 3),
    ("The interview about {0} was {1}. {2} loved it!", 3),
    # Sports & Entertainment
    ("I played golf with {0} and shot {1}. {2} was impressed!", 3),
    ("My {0} show had {1} viewers! {2} are jealous!", 3),
    ("I attended {0} and met {1}. We talked about {2}!", 3),
    ("The {0} game was {1}. I predicted {2}!", 3),
    ("I endorsed {0} for {1}. {2} will win bigly!", 3),
    # Food & Lifestyle
    ("I ordered {0} with {1}. The chef said {2}!", 3),
    ("My diet of {0} and {1} keeps me {2}!", 3),
    ("I discovered {0} at {1}. {2} recommended it!", 3),
    ("The {0} restaurant served {1}. I told them {2}!", 3),
    ("I invented {0} with {1}. {2} will be huge!", 3),
    # More Single Blanks for Variety
    ("I am tremendously {0}!", 1),
    ("The {0} are fake news!", 1),
    ("I love {0}. The best!", 1),
    ("Nobody does {0} like me!", 1),
    ("I invented {0}. True story!", 1),
    ("The {0} are rigged!", 1),
    ("I will build {0}!", 1),
    ("My {0} are incredible!", 1),
    ("I defeated {0} easily!", 1),
    ("The {0} are tremendous!", 1),
    # Two Blank Variety
    ("I turned {0} into {1}. Magic!", 2),
    ("The {0} gave me {1}. Tremendous honor!", 2),
    ("I replaced {0} with {1}. Much better!", 2),
    ("My {0} beats {1} every time!", 2),
    ("I chose {0} over {1}. Smart move!", 2),
    ("The {0} wanted {1}. I said no!", 2),
    ("I combined {0} with {1}. Genius!", 2),
    ("My {0} impressed {1} bigly!", 2),
    ("I saved {0} from {1}. Hero!", 2),
    ("The {0} copied my {1}. Sad!", 2),
]

# Lobby state constants
LOBBY_STATES = {
    'WAITING': 'waiting',    # Players can join
    'IN_GAME': 'in-game',    # Game in progress, no joining allowed
    'FINISHED': 'finished'   # Game over, host may start a rematch
}

# Round phases
GAME_PHASES = {
    'PLAYING': 'playing',
    'JUDGING': 'judging',
    'RESULTS': 'results',
    'GAME_OVER': 'gameover'
}

# Game configuration
GAME_CONFIG = {
    'HAND_SIZE': 8,
    'MAX_ROUNDS': 10,
    'MIN_PLAYERS': 2,
    'MIN_LOBBY_CAPACITY': 2,
    'MAX_LOBBY_CAPACITY': 8,
    'MIN_BLANKS': 1,
    'MAX_BLANKS': 3,
    'MAX_ROUNDS_LIMIT': 20,
    'NAME_MAX_LENGTH': 30,
    'LOBBY_NAME_MAX_LENGTH': 50,
    'LOBBY_INACTIVE_MINUTES': 5
}

# Validation errors surfaced to the requesting client
ERROR_MESSAGES = {
    'NAME_REQUIRED': 'Please set your name first',
    'INVALID_NAME': 'Please enter a valid name',
    'CANNOT_RENAME_IN_LOBBY': 'Leave your lobby before changing your name',
    'ALREADY_IN_LOBBY': 'You are already in a lobby',
    'LOBBY_NOT_FOUND': 'Lobby not found',
    'LOBBY_NOT_WAITING': 'Lobby is not accepting new players',
    'LOBBY_FULL': 'Lobby is full',
    'NOT_IN_LOBBY': 'You are not in a lobby',
    'NOT_HOST': 'Only the host can start the game',
    'NOT_ENOUGH_PLAYERS': 'Need at least 2 players to start',
    'GAME_IN_PROGRESS': 'Game already in progress',
    'INSUFFICIENT_CARDS': 'Not enough cards left in the deck',
    'INVALID_PAYLOAD': 'Invalid request'
}
