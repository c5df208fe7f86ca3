"""CSS selectors and page strings for the adventurer profile site.

Everything that depends on the site's markup lives here so a layout change
only touches this module.
"""

# Search results
SEARCH_PATH = "/pt-BR/Adventure"
SEARCH_RESULT_LINK = "div.box_list_area > ul > li > div.title > a"

# Guild roster
GUILD_PATH = "/Adventure/Guild/GuildProfile"
GUILD_MEMBER_LINK = 'a[href*="profileTarget="]'

# Family block
FAMILY_BOX = "div.profile_detail"
FAMILY_NAME = "div.nick_wrap > p.nick"
FAMILY_ROWS = "ul.line_list > li"
FAMILY_ROW_LABEL = "span.title"

# Label text per family field, matched case-insensitively as substrings.
FAMILY_LABELS = {
    "creation_date": ("criação da família", "criação"),
    "guild": ("guilda",),
    "papd": ("pa/pd", "atributo de combate", "poder de combate"),
    "energy": ("energia",),
    "contribution": ("pontos de contribuição", "contribuição"),
}

# Positional fallbacks used when a row carries no recognizable label.
FAMILY_POSITIONAL = {
    "creation_date": "ul.line_list > li:nth-child(1) > span.desc",
    "guild": "ul.line_list > li > span.guild > a",
    "papd": "ul.line_list > li:nth-child(3) > span.desc",
    "energy": "ul.line_list > li:nth-child(4) > span.desc",
    "contribution": "ul.line_list > li:nth-child(5) > span.desc",
}

# Life skills
LIFE_SKILL_ITEMS = "ul.character_data_box li"
LIFE_SKILL_NAME = "span.spec_name"
LIFE_SKILL_LEVEL = "span.spec_level"
LIFE_SKILL_MASTERY = "span.spec_stat"
LEVEL_MARKER = "Nv."

# Characters
CHARACTER_ITEMS = "ul.character_list li"
CHARACTER_NAME = "p.character_name"
CHARACTER_MAIN_LABEL = "p.character_name span.selected_label"
CHARACTER_CLASS = "span.character_symbol em:nth-child(2)"
CHARACTER_LEVEL = "span.character_info span:nth-child(2)"
MAIN_CHARACTER_TEXT = "Personagem Principal"

# Family attribute sentinel shown when the owner hides combat power.
PRIVATE_SENTINEL = "Privado"
