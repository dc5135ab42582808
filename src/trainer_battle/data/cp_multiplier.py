from pydantic import BaseModel, Field


class PokemonLevel(BaseModel):
    """One row of the level table: CP multiplier plus the cost of the next power-up"""

    level: float = Field(ge=1.0, le=51.0)
    cpm: float = Field(gt=0.0)
    powerup_stardust: int = Field(ge=0)
    powerup_candies: int = Field(ge=0)

    class Config:
        frozen = True


# (level, cpm, stardust, candies) for every half level from 1.0 to 51.0
_LEVEL_ROWS = [
    (1.0, 0.0939999967, 200, 1),
    (1.5, 0.1351374320, 200, 1),
    (2.0, 0.1663978695, 200, 1),
    (2.5, 0.1926509131, 200, 1),
    (3.0, 0.2157324701, 400, 1),
    (3.5, 0.2365726514, 400, 1),
    (4.0, 0.2557200491, 400, 1),
    (4.5, 0.2735303721, 400, 1),
    (5.0, 0.2902498841, 600, 1),
    (5.5, 0.3060573813, 600, 1),
    (6.0, 0.3210875988, 600, 1),
    (6.5, 0.3354450319, 600, 1),
    (7.0, 0.3492126762, 800, 1),
    (7.5, 0.3624577366, 800, 1),
    (8.0, 0.3752355873, 800, 1),
    (8.5, 0.3875924077, 800, 1),
    (9.0, 0.3995672762, 1000, 1),
    (9.5, 0.4111935532, 1000, 1),
    (10.0, 0.4225000143, 1000, 1),
    (10.5, 0.4329264205, 1000, 1),
    (11.0, 0.4431075453, 1300, 2),
    (11.5, 0.4530599481, 1300, 2),
    (12.0, 0.4627983868, 1300, 2),
    (12.5, 0.4723360853, 1300, 2),
    (13.0, 0.4816849529, 1600, 2),
    (13.5, 0.4908558071, 1600, 2),
    (14.0, 0.4998584389, 1600, 2),
    (14.5, 0.5087017489, 1600, 2),
    (15.0, 0.5173939466, 1900, 2),
    (15.5, 0.5259425161, 1900, 2),
    (16.0, 0.5343543291, 1900, 2),
    (16.5, 0.5426357538, 1900, 2),
    (17.0, 0.5507926940, 2200, 2),
    (17.5, 0.5588305844, 2200, 2),
    (18.0, 0.5667545199, 2200, 2),
    (18.5, 0.5745691281, 2200, 2),
    (19.0, 0.5822789072, 2500, 2),
    (19.5, 0.5898879078, 2500, 2),
    (20.0, 0.5974000096, 2500, 2),
    (20.5, 0.6048236486, 2500, 2),
    (21.0, 0.6121572852, 3000, 3),
    (21.5, 0.6194041079, 3000, 3),
    (22.0, 0.6265671253, 3000, 3),
    (22.5, 0.6336491787, 3000, 3),
    (23.0, 0.6406529545, 3500, 3),
    (23.5, 0.6475809713, 3500, 3),
    (24.0, 0.6544356346, 3500, 3),
    (24.5, 0.6612192658, 3500, 3),
    (25.0, 0.6679340004, 4000, 3),
    (25.5, 0.6745818856, 4000, 3),
    (26.0, 0.6811649203, 4000, 4),
    (26.5, 0.6876849012, 4000, 4),
    (27.0, 0.6941436529, 4500, 4),
    (27.5, 0.7005429010, 4500, 4),
    (28.0, 0.7068842053, 4500, 4),
    (28.5, 0.7131690748, 4500, 4),
    (29.0, 0.7193990945, 5000, 4),
    (29.5, 0.7255755869, 5000, 4),
    (30.0, 0.7317000031, 5000, 4),
    (30.5, 0.7347410385, 5000, 4),
    (31.0, 0.7377694845, 6000, 6),
    (31.5, 0.7407855797, 6000, 6),
    (32.0, 0.7437894344, 6000, 6),
    (32.5, 0.7467811972, 6000, 6),
    (33.0, 0.7497610449, 7000, 8),
    (33.5, 0.7527290997, 7000, 8),
    (34.0, 0.7556855082, 7000, 8),
    (34.5, 0.7586303702, 7000, 8),
    (35.0, 0.7615638375, 8000, 10),
    (35.5, 0.7644860495, 8000, 10),
    (36.0, 0.7673971652, 8000, 10),
    (36.5, 0.7702972936, 8000, 10),
    (37.0, 0.7731865048, 9000, 12),
    (37.5, 0.7760649470, 9000, 12),
    (38.0, 0.7789327502, 9000, 12),
    (38.5, 0.7817900507, 9000, 12),
    (39.0, 0.7846369743, 10000, 15),
    (39.5, 0.7874736085, 10000, 15),
    (40.0, 0.7903000116, 10000, 10),
    (40.5, 0.792803968, 10000, 10),
    (41.0, 0.7953000068, 11000, 10),
    (41.5, 0.797800015, 11000, 10),
    (42.0, 0.8003000020, 11000, 12),
    (42.5, 0.802799995, 11000, 12),
    (43.0, 0.8052999973, 12000, 12),
    (43.5, 0.8078, 12000, 12),
    (44.0, 0.8102999925, 12000, 15),
    (44.5, 0.812799985, 12000, 15),
    (45.0, 0.8152999877, 13000, 15),
    (45.5, 0.81779999, 13000, 15),
    (46.0, 0.8202999830, 13000, 17),
    (46.5, 0.82279999, 13000, 17),
    (47.0, 0.8252999782, 14000, 17),
    (47.5, 0.82779999, 14000, 17),
    (48.0, 0.8302999734, 14000, 20),
    (48.5, 0.83279999, 14000, 20),
    (49.0, 0.8353000283, 15000, 20),
    (49.5, 0.83779999, 15000, 20),
    (50.0, 0.84029999, 0, 0),
    (50.5, 0.84279999, 0, 0),
    (51.0, 0.84529999, 0, 0),
]

POKEMON_LEVELS: list[PokemonLevel] = [
    PokemonLevel(level=level, cpm=cpm, powerup_stardust=stardust, powerup_candies=candies) for level, cpm, stardust, candies in _LEVEL_ROWS
]
