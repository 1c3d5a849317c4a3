"""Bundled sample catalog for demos and smoke tests."""

SAMPLE_CSV = """name,price,category,temperature,protein,tags,base quantity,scales with headcount
Steamed rice,3,staple,hot,vegetarian,"rice,staple",1,Yes
Braised pork belly,38,main,hot,meat,pork braised hearty,1,No
Mapo tofu,22,side,hot,vegetarian,"tofu,sichuan,vegetarian",1,No
Seaweed egg drop soup,15,soup,hot,vegetarian,seaweed egg soup,1,Yes
Mung bean dessert,8,dessert,cold,vegetarian,"mung-bean,sweet,cooling",1,No
Cola chicken wings,35,main,hot,meat,chicken cola homestyle,1,No
Steamed egg custard,12,side,hot,vegetarian,egg silky,1,No
Smashed cucumber,10,side,,vegetarian,cucumber cold-dish,1,
Soup dumplings,18,staple,,meat,pork dumplings,2,No
Sour plum drink,6,dessert,cold,,plum drink,1,No
"""  # noqa: E501
