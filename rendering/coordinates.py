# This project was developed with assistance from AI tools.
"""
Coordinate table for template 51-1 (居住用建物／普通賃貸借契約〔連帯保証人型〕).

A4 portrait, 595 x 842 pt, origin bottom-left. Page 2 is the printed table
of contents and has no fillable slots.
"""
from .registry import (
    Band,
    Column,
    FieldCoordinate,
    FieldRegistry,
    OcclusionPolicy,
    PageLayout,
    RowGroup,
    register,
)

VERSION = "51-1"
PAGE_WIDTH = 595.0
PAGE_HEIGHT = 842.0
PAGE_COUNT = 8

GENEROUS = OcclusionPolicy.GENEROUS


def _f(x, y, w, h, size=None, max_width=None, occlusion=OcclusionPolicy.TIGHT, suffix=None):
    return FieldCoordinate(
        x=x, y=y, width=w, height=h,
        font_size=size, max_width=max_width,
        occlusion=occlusion, printed_suffix=suffix,
    )


def _block(x, y, w, h, size):
    """Multi-line free-text box; wraps at the box width."""
    return _f(x, y, w, h, size, max_width=w)


def _check(x, y, size=10):
    return _f(x, y, 12, 12, size)


# =============================================================================
# Page 1: header, brokers, trading officers, guarantee association
# =============================================================================
PAGE1 = PageLayout(
    number=1,
    width=PAGE_WIDTH,
    height=PAGE_HEIGHT,
    fields={
        "borrower_name": _f(70, 752, 230, 14, 11, occlusion=GENEROUS),
        "lender_name": _f(385, 752, 190, 14, 11, occlusion=GENEROUS),

        "transaction_left_mediation": _check(110, 692, 12),
        "transaction_left_agent": _check(175, 692, 12),
        "transaction_right_mediation": _check(370, 692, 12),
        "transaction_right_agent": _check(435, 692, 12),

        "broker1_license": _f(192, 660, 145, 12, 8),
        "broker1_address": _f(192, 640, 145, 24, 7, max_width=145),
        "broker1_phone": _f(192, 614, 145, 12, 8),
        "broker1_name": _f(192, 596, 145, 12, 8),
        "broker1_representative": _f(192, 578, 145, 12, 8),

        "broker2_license": _f(442, 660, 145, 12, 8),
        "broker2_address": _f(442, 640, 145, 24, 7, max_width=145),
        "broker2_phone": _f(442, 614, 145, 12, 8),
        "broker2_name": _f(442, 596, 145, 12, 8),
        "broker2_representative": _f(442, 578, 145, 12, 8),

        "officer1_registration": _f(192, 546, 145, 12, 8),
        "officer1_name": _f(192, 528, 145, 12, 8),
        "officer1_office_name": _f(192, 510, 145, 12, 8),
        "officer1_office_address": _f(192, 490, 145, 24, 7, max_width=145),
        "officer1_phone": _f(192, 466, 145, 12, 8),

        "officer2_registration": _f(442, 546, 145, 12, 8),
        "officer2_name": _f(442, 528, 145, 12, 8),
        "officer2_office_name": _f(442, 510, 145, 12, 8),
        "officer2_office_address": _f(442, 490, 145, 24, 7, max_width=145),
        "officer2_phone": _f(442, 466, 145, 12, 8),

        "guarantee_check_left": _check(102, 440, 12),
        "guarantee_check_right": _check(370, 440, 12),
        "guarantee_name": _f(192, 420, 380, 12, 7),
        "guarantee_address": _f(192, 406, 380, 12, 7),
        "local_branch_name": _f(192, 382, 380, 12, 7),
        "local_branch_address": _f(192, 368, 380, 12, 7),
        "deposit_office": _f(192, 344, 380, 12, 7),
        "deposit_office_address": _f(192, 330, 380, 12, 7),

        "signature_year": _f(420, 258, 30, 12, 10),
        "signature_month": _f(462, 258, 25, 12, 10),
        "signature_day": _f(500, 258, 25, 12, 10),
        "lender_sign_address": _f(120, 228, 350, 12, 9),
        "lender_sign_corp_name": _f(120, 210, 350, 12, 9),
        "lender_sign_rep_name": _f(120, 192, 350, 12, 9),
        "borrower_sign_address": _f(120, 158, 350, 12, 9),
        "borrower_sign_name": _f(120, 140, 350, 12, 9),
    },
)

# =============================================================================
# Page 3: building, landlord, registry, legal restrictions, water/electricity
# =============================================================================
PAGE3 = PageLayout(
    number=3,
    width=PAGE_WIDTH,
    height=PAGE_HEIGHT,
    fields={
        "building_name": _f(138, 785, 430, 12, 9, occlusion=GENEROUS),
        "address_display": _f(138, 765, 430, 12, 9, occlusion=GENEROUS),
        "address_registry": _f(138, 745, 430, 12, 9, occlusion=GENEROUS),

        "type_mansion": _check(190, 726),
        "type_apartment": _check(262, 726),
        "type_detached": _check(322, 726),
        "type_terrace": _check(378, 726),

        "structure": _f(138, 708, 430, 12, 9),
        "floor_area": _f(168, 690, 80, 12, 9),
        "floor_area_registry": _f(298, 690, 80, 12, 9),
        "layout": _f(435, 690, 60, 12, 9),
        "built_date": _f(138, 672, 200, 12, 9),

        "landlord_same_check": _check(200, 645),
        "landlord_diff_check": _check(348, 645),
        "landlord_address": _f(100, 624, 470, 12, 9),
        "landlord_name": _f(100, 606, 470, 12, 9),
        "landlord_remarks": _block(100, 586, 470, 24, 8),

        "registry_date": _f(410, 555, 160, 12, 8),
        "owner_address": _f(138, 530, 430, 12, 9, occlusion=GENEROUS),
        "owner_name": _f(138, 512, 430, 12, 9, occlusion=GENEROUS),

        "ownership_yes": _check(222, 492),
        "ownership_no": _check(260, 492),
        "ownership_detail": _block(138, 474, 430, 24, 8),

        "other_rights_yes": _check(222, 440),
        "other_rights_no": _check(260, 440),
        "other_rights_detail": _block(100, 418, 470, 36, 7),

        "legal_restrictions": _block(100, 350, 470, 24, 8),

        "water_available_yes": _check(225, 288),
        "water_available_no": _check(192, 288),
        "water_provider": _f(280, 300, 120, 12, 8),

        "electricity_available_yes": _check(225, 248),
        "electricity_available_no": _check(192, 248),
        "electricity_provider": _f(280, 260, 120, 12, 8),
    },
)

# =============================================================================
# Page 4: gas, drainage, equipment checklist
# =============================================================================
EQUIPMENT_KEYS = (
    "electricity", "gas", "stove", "water_supply", "sewage", "kitchen",
    "toilet", "bathroom", "washstand", "laundry", "hot_water", "aircon",
    "lighting", "furniture", "digital_tv", "catv", "internet", "trunk_room",
)

PAGE4 = PageLayout(
    number=4,
    width=PAGE_WIDTH,
    height=PAGE_HEIGHT,
    fields={
        "gas_available_yes": _check(225, 795),
        "gas_available_no": _check(192, 795),
        "gas_type": _f(280, 805, 120, 12, 8),

        "drainage_available_yes": _check(225, 755),
        "drainage_available_no": _check(192, 755),
        "drainage_type": _f(280, 765, 120, 12, 8),
    },
    row_groups={
        "equipment": RowGroup(
            start_y=620,
            row_height=18,
            columns={
                "yes": Column(x=225, width=12, font_size=10),
                "no": Column(x=268, width=12, font_size=10),
                "detail": Column(x=320, width=250, font_size=7),
            },
            keys=EQUIPMENT_KEYS,
        ),
    },
    # Sample detail text printed in the template's equipment table
    bands=(Band(x0=318, y0=310, x1=575, y1=634),),
)

# =============================================================================
# Page 5: common facilities, hazard zones, hazard map, asbestos, earthquake
# =============================================================================
COMMON_FACILITY_KEYS = (
    "elevator", "auto_lock", "mailbox", "delivery_box", "trunk_room",
    "parking", "bicycle", "bike_parking",
)

PAGE5 = PageLayout(
    number=5,
    width=PAGE_WIDTH,
    height=PAGE_HEIGHT,
    fields={
        "developed_land_outside": _check(440, 490),
        "developed_land_inside": _check(478, 490),

        "landslide_warning_outside": _check(440, 452),
        "landslide_warning_inside": _check(478, 452),
        "landslide_special_outside": _check(440, 434),
        "landslide_special_inside": _check(478, 434),

        "tsunami_warning_outside": _check(440, 398),
        "tsunami_warning_inside": _check(478, 398),
        "tsunami_special_outside": _check(440, 380),
        "tsunami_special_inside": _check(478, 380),

        "flood_yes": _check(254, 334),
        "flood_no": _check(280, 334),
        "storm_water_yes": _check(370, 334),
        "storm_water_no": _check(396, 334),
        "storm_surge_yes": _check(480, 334),
        "storm_surge_no": _check(506, 334),
        "hazard_map_detail": _block(100, 310, 470, 24, 8),

        "asbestos_record_yes": _check(102, 240),
        "asbestos_record_no": _check(102, 222),

        "earthquake_applicable": _check(192, 168),
        "earthquake_not_applicable": _check(310, 168),
        "earthquake_diagnosis_yes": _check(140, 148),
        "earthquake_diagnosis_no": _check(178, 148),
    },
    row_groups={
        "common_facilities": RowGroup(
            start_y=780,
            row_height=22,
            columns={
                "yes": Column(x=225, width=12, font_size=10),
                "no": Column(x=268, width=12, font_size=10),
                "detail": Column(x=320, width=250, font_size=7),
            },
            keys=COMMON_FACILITY_KEYS,
        ),
    },
)

# =============================================================================
# Page 6: rent and fees, penalty, security measure
# =============================================================================
PAGE6 = PageLayout(
    number=6,
    width=PAGE_WIDTH,
    height=PAGE_HEIGHT,
    fields={
        "rent": _f(252, 690, 100, 12, 9),
        "management_fee": _f(252, 670, 100, 12, 9),
        "deposit": _f(252, 650, 100, 12, 9),
        "key_money": _f(252, 630, 100, 12, 9),

        "payment_deadline": _f(170, 548, 200, 12, 8),
        "payment_method": _f(400, 548, 160, 12, 8),
        "bank_info": _f(70, 528, 500, 12, 8),

        "penalty_no": _check(70, 172),
        "penalty_yes": _check(108, 172),
        "penalty_detail": _block(148, 172, 420, 24, 7),

        "security_yes": _check(200, 108),
        "security_no": _check(300, 108),
    },
    row_groups={
        "other_fees": RowGroup(
            start_y=610,
            row_height=18,
            columns={
                "name": Column(x=70, width=170, font_size=8),
                "amount": Column(x=252, width=100, font_size=9),
            },
            max_rows=3,
        ),
    },
    # Sample fee rows printed in the template
    bands=(Band(x0=66, y0=568, x1=356, y1=624),),
)

# =============================================================================
# Page 7: contract period, renewal, usage restrictions, deposit settlement
# =============================================================================
PAGE7 = PageLayout(
    number=7,
    width=PAGE_WIDTH,
    height=PAGE_HEIGHT,
    fields={
        "contract_type": _f(192, 805, 300, 12, 9),
        "contract_start": _f(192, 785, 200, 12, 9),
        "contract_end": _f(192, 765, 200, 12, 9),
        "contract_period": _f(430, 765, 40, 12, 9),

        "renewal_fee_yes": _check(310, 720),
        "renewal_fee_no": _check(348, 720),
        "renewal_fee_amount": _f(370, 700, 150, 12, 9),
        "renewal_admin_fee": _f(100, 678, 300, 12, 9),

        "usage_purpose": _f(280, 640, 250, 12, 8),
        "pet_policy": _f(280, 620, 250, 12, 8),
        "instrument_policy": _block(280, 600, 250, 24, 7),
        "renovation_policy": _block(280, 574, 250, 24, 7),

        "deposit_settlement_amount": _f(160, 480, 120, 12, 9, suffix="円"),
    },
)

# =============================================================================
# Page 8: management companies, other important matters, attachments, remarks
# =============================================================================
PAGE8 = PageLayout(
    number=8,
    width=PAGE_WIDTH,
    height=PAGE_HEIGHT,
    fields={
        "building_manager_name": _f(192, 740, 200, 12, 8),
        "building_manager_address": _f(192, 722, 200, 12, 7),
        "building_manager_phone": _f(192, 704, 200, 12, 8),

        "property_manager_name": _f(192, 670, 200, 12, 8),
        "property_manager_address": _f(192, 652, 200, 12, 7),
        "property_manager_phone": _f(192, 634, 200, 12, 8),

        "other_matters": _block(50, 570, 510, 80, 7),
        "attachments": _block(50, 450, 510, 50, 8),
        "remarks": _block(50, 360, 510, 80, 7),
    },
)

REGISTRY = register(FieldRegistry(
    version=VERSION,
    pages=[PAGE1, PAGE3, PAGE4, PAGE5, PAGE6, PAGE7, PAGE8],
    page_count=PAGE_COUNT,
))
