# Static betting insight tables for the IPL 2022 season. Served as-is by the
# /v1/betting endpoints; nothing here is read from the database.


# ----------------------------- Team Profiles ----------------------------- #
# risk_level: 1-5, lower is safer
TEAM_BETTING_DATA = {
    'GT': {
        'abbr': 'GT',
        'name': 'Gujarat Titans',
        'win_rate': 75.0,
        'chasing_win_rate': 78,
        'batting_first_win_rate': 71,
        'avg_score': 166.4,
        'recommendation': 'STRONG_BET',
        'strategy': 'Always bet on GT when chasing (78% win rate)',
        'risk_level': 1,
        'tips': [
            'Best team when chasing targets 160-180',
            'Hardik Pandya key for middle overs acceleration',
            'David Miller finishes games (9 not-outs)',
        ],
    },
    'RR': {
        'abbr': 'RR',
        'name': 'Rajasthan Royals',
        'win_rate': 62.5,
        'chasing_win_rate': 57,
        'batting_first_win_rate': 67,
        'avg_score': 183.9,
        'recommendation': 'GOOD_BET',
        'strategy': 'Bet on RR batting first - highest scoring team (183.9 avg)',
        'risk_level': 2,
        'tips': [
            'Jos Buttler 47% big score conversion rate',
            'RR Total Over 175 when batting first (68% probability)',
            'Shimron Hetmyer excellent finisher (10 not-outs)',
        ],
    },
    'LSG': {
        'abbr': 'LSG',
        'name': 'Lucknow Super Giants',
        'win_rate': 52.9,
        'chasing_win_rate': 71,
        'batting_first_win_rate': 57,
        'avg_score': 149.9,
        'recommendation': 'MODERATE_BET',
        'strategy': 'LSG better when chasing (71% win rate)',
        'risk_level': 2,
        'tips': [
            'KL Rahul + Quinton de Kock strongest opening pair',
            'Opening partnership 60+ sets up wins',
            'Good for chasing targets 160-180',
        ],
    },
    'RCB': {
        'abbr': 'RCB',
        'name': 'Royal Challengers Bangalore',
        'win_rate': 56.3,
        'chasing_win_rate': 67,
        'batting_first_win_rate': 50,
        'avg_score': 164.5,
        'recommendation': 'MODERATE_BET',
        'strategy': 'Better when chasing, high volatility team',
        'risk_level': 3,
        'tips': [
            'Dinesh Karthik 183.33 SR in death overs',
            'Avoid "to bat full 20 overs" bets',
            'High collapse risk (scored 68 all out once)',
        ],
    },
    'DC': {
        'abbr': 'DC',
        'name': 'Delhi Capitals',
        'win_rate': 50.0,
        'chasing_win_rate': 57,
        'batting_first_win_rate': 43,
        'avg_score': 167.2,
        'recommendation': 'NEUTRAL',
        'strategy': 'Slightly better chasing, David Warner key',
        'risk_level': 3,
        'tips': [
            'David Warner 42% fifty conversion rate',
            'Prithvi Shaw explosive opener (152.97 SR)',
            'Mid-table team - avoid in big stakes',
        ],
    },
    'PBKS': {
        'abbr': 'PBKS',
        'name': 'Punjab Kings',
        'win_rate': 50.0,
        'chasing_win_rate': 57,
        'batting_first_win_rate': 43,
        'avg_score': 167.4,
        'recommendation': 'NEUTRAL',
        'strategy': 'Inconsistent team, Livingstone key for sixes',
        'risk_level': 3,
        'tips': [
            'Liam Livingstone 3.4 sixes per match',
            'Good for "most sixes" player bets',
            'Inconsistent - avoid team win bets',
        ],
    },
    'KKR': {
        'abbr': 'KKR',
        'name': 'Kolkata Knight Riders',
        'win_rate': 42.9,
        'chasing_win_rate': 50,
        'batting_first_win_rate': 43,
        'avg_score': 158.8,
        'recommendation': 'AVOID',
        'strategy': 'Below average team, avoid betting',
        'risk_level': 4,
        'tips': [
            'Andre Russell explosive but inconsistent',
            'Shreyas Iyer anchor but low SR',
            'Better to bet against KKR vs top 4',
        ],
    },
    'SRH': {
        'abbr': 'SRH',
        'name': 'Sunrisers Hyderabad',
        'win_rate': 42.9,
        'chasing_win_rate': 50,
        'batting_first_win_rate': 43,
        'avg_score': 156.9,
        'recommendation': 'AVOID',
        'strategy': 'Weak batting, worst NRR in bottom half',
        'risk_level': 4,
        'tips': [
            'Aiden Markram only reliable bat (47.63 avg)',
            'Poor death overs batting',
            'Avoid team bets, consider individual player bets',
        ],
    },
    'CSK': {
        'abbr': 'CSK',
        'name': 'Chennai Super Kings',
        'win_rate': 28.6,
        'chasing_win_rate': 29,
        'batting_first_win_rate': 29,
        'avg_score': 163.4,
        'recommendation': 'STRONG_AVOID',
        'strategy': 'Worst season ever - always bet AGAINST CSK',
        'risk_level': 5,
        'tips': [
            'Only 4 wins in season',
            'Bet AGAINST CSK vs any top 4 team',
            'High collapse risk - 2 all-out scores',
        ],
    },
    'MI': {
        'abbr': 'MI',
        'name': 'Mumbai Indians',
        'win_rate': 28.6,
        'chasing_win_rate': 29,
        'batting_first_win_rate': 29,
        'avg_score': 158.4,
        'recommendation': 'STRONG_AVOID',
        'strategy': 'Defending champions collapsed - bet AGAINST MI',
        'risk_level': 5,
        'tips': [
            'Worst NRR (-0.506) indicates heavy defeats',
            'Only 4 wins - worst ever MI season',
            'Suryakumar Yadav only bright spot',
        ],
    },
}


# ----------------------------- Player Bets ----------------------------- #
# big_score_rate: percentage of innings with 50+
TOP_PLAYER_BETS = [
    {
        'id': 1,
        'name': 'Jos Buttler',
        'team': 'RR',
        'role': 'Opener',
        'runs': 863,
        'average': 57.53,
        'strike_rate': 149.05,
        'centuries': 4,
        'fifties': 4,
        'sixes': 45,
        'fours': 83,
        'big_score_rate': 47.1,
        'sixes_per_match': 2.65,
        'fours_per_match': 4.88,
        'betting_tips': [
            {'type': 'To score 50+', 'probability': 47, 'risk': 'LOW', 'stars': 5},
            {'type': 'To score century', 'probability': 23.5, 'risk': 'MEDIUM', 'stars': 4},
            {'type': 'Top team batsman', 'probability': 42, 'risk': 'LOW', 'stars': 5},
            {'type': 'To hit 3+ sixes', 'probability': 45, 'risk': 'LOW', 'stars': 4},
            {'type': 'Most match sixes', 'probability': 38, 'risk': 'MEDIUM', 'stars': 4},
        ],
        'verdict': 'ELITE - Safest batting bet in tournament',
    },
    {
        'id': 2,
        'name': 'KL Rahul',
        'team': 'LSG',
        'role': 'Opener',
        'runs': 616,
        'average': 51.33,
        'strike_rate': 135.38,
        'centuries': 2,
        'fifties': 4,
        'sixes': 30,
        'fours': 45,
        'big_score_rate': 40.0,
        'sixes_per_match': 2.0,
        'fours_per_match': 3.0,
        'betting_tips': [
            {'type': 'To score 50+', 'probability': 40, 'risk': 'LOW', 'stars': 4},
            {'type': 'To score century', 'probability': 13.3, 'risk': 'HIGH', 'stars': 3},
            {'type': 'Top team batsman', 'probability': 38, 'risk': 'LOW', 'stars': 4},
            {'type': 'Opening partnership 60+', 'probability': 52, 'risk': 'MEDIUM', 'stars': 4},
        ],
        'verdict': 'EXCELLENT - Consistent anchor batsman',
    },
    {
        'id': 3,
        'name': 'David Miller',
        'team': 'GT',
        'role': 'Finisher',
        'runs': 481,
        'average': 68.71,
        'strike_rate': 142.73,
        'centuries': 0,
        'fifties': 2,
        'sixes': 23,
        'fours': 32,
        'big_score_rate': 12.5,
        'not_outs': 9,
        'betting_tips': [
            {'type': 'To remain not out', 'probability': 60, 'risk': 'LOW', 'stars': 5},
            {'type': 'To score 25+ (death overs)', 'probability': 45, 'risk': 'LOW', 'stars': 4},
            {'type': 'To hit 2+ sixes', 'probability': 40, 'risk': 'MEDIUM', 'stars': 3},
        ],
        'verdict': 'ELITE FINISHER - Best "not out" bet',
    },
    {
        'id': 4,
        'name': 'Dinesh Karthik',
        'team': 'RCB',
        'role': 'Death Specialist',
        'runs': 330,
        'average': 55.0,
        'strike_rate': 183.33,
        'centuries': 0,
        'fifties': 0,
        'sixes': 19,
        'fours': 25,
        'not_outs': 10,
        'betting_tips': [
            {'type': 'Highest score in death overs', 'probability': 35, 'risk': 'MEDIUM', 'stars': 4},
            {'type': 'To remain not out', 'probability': 60, 'risk': 'LOW', 'stars': 5},
            {'type': 'To score 25+ in last 5 overs', 'probability': 45, 'risk': 'MEDIUM', 'stars': 4},
        ],
        'verdict': 'DEATH SPECIALIST - Best SR in tournament (183.33)',
    },
    {
        'id': 5,
        'name': 'David Warner',
        'team': 'DC',
        'role': 'Opener',
        'runs': 432,
        'average': 48.0,
        'strike_rate': 150.69,
        'centuries': 0,
        'fifties': 5,
        'sixes': 18,
        'fours': 52,
        'big_score_rate': 41.7,
        'betting_tips': [
            {'type': 'To score 50+', 'probability': 42, 'risk': 'LOW', 'stars': 4},
            {'type': 'Top team batsman', 'probability': 40, 'risk': 'LOW', 'stars': 4},
            {'type': 'To score 35+ in powerplay', 'probability': 32, 'risk': 'MEDIUM', 'stars': 3},
        ],
        'verdict': 'EXCELLENT - Aggressive opener, consistent performer',
    },
    {
        'id': 6,
        'name': 'Quinton de Kock',
        'team': 'LSG',
        'role': 'Opener',
        'runs': 508,
        'average': 36.29,
        'strike_rate': 148.97,
        'centuries': 1,
        'fifties': 3,
        'sixes': 23,
        'fours': 47,
        'betting_tips': [
            {'type': 'To score 40+ in powerplay', 'probability': 35, 'risk': 'MEDIUM', 'stars': 3},
            {'type': 'Opening partnership 60+ (with Rahul)', 'probability': 40, 'risk': 'MEDIUM', 'stars': 4},
        ],
        'verdict': 'GOOD - Explosive opener, pairs well with Rahul',
    },
    {
        'id': 7,
        'name': 'Liam Livingstone',
        'team': 'PBKS',
        'role': 'Power Hitter',
        'runs': 213,
        'average': 26.63,
        'strike_rate': 182.08,
        'centuries': 0,
        'fifties': 1,
        'sixes': 34,
        'fours': 11,
        'sixes_per_match': 3.4,
        'betting_tips': [
            {'type': 'To hit 4+ sixes', 'probability': 28, 'risk': 'MEDIUM', 'stars': 4},
            {'type': 'Most sixes in match', 'probability': 45, 'risk': 'MEDIUM', 'stars': 4},
        ],
        'verdict': 'SIX-HITTING SPECIALIST - Best for boundary bets',
    },
    {
        'id': 8,
        'name': 'Hardik Pandya',
        'team': 'GT',
        'role': 'All-rounder',
        'runs': 487,
        'average': 44.27,
        'strike_rate': 131.27,
        'centuries': 0,
        'fifties': 4,
        'sixes': 12,
        'fours': 49,
        'betting_tips': [
            {'type': 'Man of the Match', 'probability': 33, 'risk': 'MEDIUM', 'stars': 4},
            {'type': 'To score 30+', 'probability': 45, 'risk': 'LOW', 'stars': 4},
            {'type': 'To take 1+ wicket', 'probability': 40, 'risk': 'MEDIUM', 'stars': 3},
        ],
        'verdict': 'ALL-ROUNDER VALUE - Good for MOTM bets',
    },
]


# ----------------------------- Match Scenarios ----------------------------- #
MATCH_SCENARIOS = [
    {
        'scenario': 'GT chasing 160-180',
        'win_probability': 78,
        'recommendation': 'BET_GT',
        'confidence': 'HIGH',
        'reasoning': 'GT has 78% win rate when chasing. Strong middle order with Miller and Pandya.',
    },
    {
        'scenario': 'RR batting first',
        'expected_total': '175+',
        'probability': 68,
        'recommendation': 'BET_OVER_175',
        'confidence': 'HIGH',
        'reasoning': 'RR averages 183.9 runs/match. Buttler-led attack is explosive.',
    },
    {
        'scenario': 'RCB vs MI/CSK',
        'win_probability': 75,
        'recommendation': 'BET_RCB',
        'confidence': 'HIGH',
        'reasoning': 'MI and CSK only won 28.6% of matches. RCB favored against bottom teams.',
    },
    {
        'scenario': 'Any team scores 200+',
        'probability': 8,
        'recommendation': 'AVOID',
        'confidence': 'HIGH',
        'reasoning': 'Only 1 score of 220+ in tournament. Very rare event.',
    },
    {
        'scenario': 'Team all out under 100',
        'probability': 5,
        'recommendation': 'AVOID',
        'confidence': 'HIGH',
        'reasoning': 'Only 4 occurrences in 74 matches. Rare but devastating when happens.',
    },
    {
        'scenario': 'Buttler to score 50+',
        'probability': 47,
        'recommendation': 'STRONG_BET',
        'confidence': 'VERY_HIGH',
        'reasoning': 'Buttler scored 50+ in 47% of innings. Safest player performance bet.',
    },
    {
        'scenario': 'Miller to remain not out',
        'probability': 60,
        'recommendation': 'STRONG_BET',
        'confidence': 'VERY_HIGH',
        'reasoning': 'Miller remained not out in 9 of 16 innings. Elite finisher.',
    },
    {
        'scenario': 'Death overs (16-20) 60+ runs',
        'probability': 38,
        'recommendation': 'MODERATE_BET',
        'confidence': 'MEDIUM',
        'reasoning': 'Depends on finishers at crease. RCB with Karthik most likely.',
    },
]


# ----------------------------- Risk Categories ----------------------------- #
RISK_CATEGORIES = {
    'safe_bets': [
        {'bet': 'Buttler to score 50+', 'probability': 47, 'team': 'RR', 'stars': 5},
        {'bet': 'GT to win when chasing', 'probability': 78, 'team': 'GT', 'stars': 5},
        {'bet': 'RR Total Over 175', 'probability': 68, 'team': 'RR', 'stars': 4},
        {'bet': 'Miller to remain not out', 'probability': 60, 'team': 'GT', 'stars': 5},
        {'bet': 'LSG opening partnership 60+', 'probability': 52, 'team': 'LSG', 'stars': 4},
    ],
    'value_bets': [
        {'bet': 'Karthik highest in death overs', 'probability': 35, 'team': 'RCB', 'stars': 4},
        {'bet': 'Livingstone 4+ sixes', 'probability': 28, 'team': 'PBKS', 'stars': 4},
        {'bet': 'Rajat Patidar to score 50+', 'probability': 30, 'team': 'RCB', 'stars': 3},
        {'bet': 'GT vs RR close match (<15 runs)', 'probability': 40, 'team': 'GT/RR', 'stars': 3},
    ],
    'avoid_bets': [
        {'bet': 'MI to win vs Top 4', 'probability': 15, 'team': 'MI', 'reason': 'Worst season'},
        {'bet': 'CSK to win vs Top 4', 'probability': 18, 'team': 'CSK', 'reason': 'Collapsed'},
        {'bet': 'Any team to score 220+', 'probability': 8, 'team': 'Any', 'reason': 'Very rare'},
        {'bet': 'Virat Kohli to score 50+', 'probability': 12, 'team': 'RCB', 'reason': 'Poor form'},
    ],
}


# ----------------------------- Overview ----------------------------- #
KEY_INSIGHTS = [
    {'icon': 'trophy', 'title': 'Best Team Bet', 'value': 'GT when chasing', 'probability': '78%'},
    {'icon': 'user', 'title': 'Best Player Bet', 'value': 'Buttler 50+', 'probability': '47%'},
    {'icon': 'target', 'title': 'Best Finisher Bet', 'value': 'Miller not out', 'probability': '60%'},
    {'icon': 'zap', 'title': 'Best Boundary Bet', 'value': 'Livingstone sixes', 'probability': '45%'},
]

TOURNAMENT_SNAPSHOT = {
    'total_matches': 74,
    'total_centuries': 8,
    'century_rate': '5.4%',
    'avg_match_score': 165,
    'highest_score': '222/2 (RR)',
    'lowest_score': '68/10 (RCB)',
}

# Predictor thresholds
UPSET_THRESHOLD = 35
SAFE_RISK_LEVEL = 2
