from skill_gap_analyzer import analyze_skill_gaps, find_skill_gap, index_skills_by_name


def skill(name, level, category='Frameworks & Libraries'):
    return {'name': name, 'category': category, 'level': level}


def test_under_level_skill_ranks_above_less_important_missing_skill(catalog):
    skills = [skill('React', 4), skill('TypeScript', 2, 'Programming Languages')]

    gaps = analyze_skill_gaps(skills, catalog.demand_skills())
    names = [gap['skill_name'] for gap in gaps]

    assert 'React' not in names
    assert names.index('TypeScript') < names.index('Node.js')

    typescript = gaps[names.index('TypeScript')]
    assert typescript['current_level'] == 2
    assert typescript['recommended_level'] == 4
    assert typescript['importance'] == 5

    node = gaps[names.index('Node.js')]
    assert 'current_level' not in node
    assert node['importance'] == 4


def test_gap_order_is_importance_then_catalog_order(catalog):
    skills = [skill('React', 4), skill('TypeScript', 2, 'Programming Languages')]

    gaps = analyze_skill_gaps(skills, catalog.demand_skills())

    assert [gap['skill_name'] for gap in gaps] == [
        'TypeScript', 'Data Structures', 'Algorithms',
        'Node.js', 'AWS', 'Next.js', 'SQL',
        'Docker', 'GraphQL', 'MongoDB',
    ]


def test_matching_ignores_case():
    demand = [{'name': 'Node.js', 'category': 'Frameworks & Libraries', 'recommended_level': 4, 'importance': 4}]

    assert analyze_skill_gaps([skill('node.JS', 4)], demand) == []

    gaps = analyze_skill_gaps([skill('NODE.JS', 1)], demand)
    assert gaps[0]['current_level'] == 1


def test_meeting_or_exceeding_the_recommended_level_is_not_a_gap():
    demand = {'name': 'SQL', 'category': 'Databases', 'recommended_level': 3, 'importance': 4}

    assert find_skill_gap(demand, skill('SQL', 3, 'Databases')) is None
    assert find_skill_gap(demand, skill('SQL', 5, 'Databases')) is None
    assert find_skill_gap(demand, skill('SQL', 2, 'Databases'))['current_level'] == 2


def test_no_skills_means_every_demand_entry_is_missing(catalog):
    demand = catalog.demand_skills()

    gaps = analyze_skill_gaps([], demand)

    assert len(gaps) == len(demand)
    assert all('current_level' not in gap for gap in gaps)


def test_empty_demand_catalog_has_no_gaps():
    assert analyze_skill_gaps([skill('React', 1)], []) == []


def test_first_duplicate_skill_record_wins():
    index = index_skills_by_name([skill('React', 2), skill('react', 5)])

    assert index['react']['level'] == 2
