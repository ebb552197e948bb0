"""Bundled sample listings shown when RentCast is not configured or unavailable."""

from typing import Tuple

from ..models import Property


MOCK_PROPERTIES: Tuple[Property, ...] = (
    Property(
        id="mock-1",
        address="742 Hayes St",
        city="San Francisco",
        state="CA",
        zip_code="94102",
        price=1395000,
        rent_estimate=5200,
        bedrooms=3,
        bathrooms=2,
        square_footage=1640,
        year_built=1908,
        latitude=37.7764,
        longitude=-122.4266,
        property_type="Single Family",
        image_url="https://images.unsplash.com/photo-1568605114967-8130f3a36994?w=800",
    ),
    Property(
        id="mock-2",
        address="3150 24th St, Apt 4",
        city="San Francisco",
        state="CA",
        zip_code="94110",
        price=875000,
        rent_estimate=3900,
        bedrooms=2,
        bathrooms=1,
        square_footage=980,
        year_built=1925,
        latitude=37.7525,
        longitude=-122.4156,
        property_type="Condo",
    ),
    Property(
        id="mock-3",
        address="418 Vernon St",
        city="Oakland",
        state="CA",
        zip_code="94610",
        price=1049000,
        rent_estimate=4300,
        bedrooms=4,
        bathrooms=2.5,
        square_footage=2110,
        year_built=1915,
        latitude=37.8118,
        longitude=-122.2528,
        property_type="Single Family",
    ),
    Property(
        id="mock-4",
        address="1620 Robinson Ave",
        city="San Diego",
        state="CA",
        zip_code="92103",
        price=689000,
        bedrooms=2,
        bathrooms=2,
        square_footage=1120,
        property_type="Townhouse",
    ),
    Property(
        id="mock-5",
        address="1908 S 5th St",
        city="Austin",
        state="TX",
        zip_code="78704",
        price=749000,
        rent_estimate=3400,
        bedrooms=3,
        bathrooms=2,
        square_footage=1580,
        year_built=1952,
        latitude=30.2459,
        longitude=-97.7587,
        property_type="Single Family",
        image_url="https://images.unsplash.com/photo-1570129477492-45c003edd2be?w=800",
    ),
    Property(
        id="mock-6",
        address="1104 Chestnut Ave",
        city="Austin",
        state="TX",
        zip_code="78702",
        rent_estimate=2650,
        bedrooms=2,
        bathrooms=1,
        square_footage=890,
        property_type="Apartment",
    ),
    Property(
        id="mock-7",
        address="2855 Champa St",
        city="Denver",
        state="CO",
        zip_code="80205",
        price=615000,
        rent_estimate=2900,
        bedrooms=3,
        bathrooms=2,
        square_footage=1470,
        year_built=1890,
        latitude=39.7579,
        longitude=-104.9788,
        property_type="Single Family",
    ),
    Property(
        id="mock-8",
        address="4207 Phinney Ave N",
        city="Seattle",
        state="WA",
        zip_code="98103",
        price=962000,
        rent_estimate=3800,
        bedrooms=3,
        bathrooms=1.75,
        square_footage=1760,
        year_built=1926,
        latitude=47.6577,
        longitude=-122.3543,
        property_type="Single Family",
    ),
    Property(
        id="mock-9",
        address="1735 SE Ash St",
        city="Portland",
        state="OR",
        zip_code="97214",
        price=525000,
        bedrooms=2,
        bathrooms=1,
        square_footage=1210,
        year_built=1911,
        property_type="Single Family",
    ),
    Property(
        id="mock-10",
        address="2134 N Cleveland Ave, Unit 3",
        city="Chicago",
        state="IL",
        zip_code="60614",
        price=455000,
        rent_estimate=2700,
        bedrooms=2,
        bathrooms=2,
        square_footage=1150,
        year_built=1999,
        property_type="Condo",
    ),
    Property(
        id="mock-11",
        address="512 7th St",
        city="Brooklyn",
        state="NY",
        zip_code="11215",
        price=2295000,
        rent_estimate=7500,
        bedrooms=4,
        bathrooms=3,
        square_footage=2800,
        year_built=1899,
        latitude=40.6673,
        longitude=-73.9817,
        property_type="Multi-Family",
        image_url="https://images.unsplash.com/photo-1512917774080-9991f1c4c750?w=800",
    ),
    Property(
        id="mock-12",
        address="4000 NE 2nd Ave",
        city="Miami",
        state="FL",
        zip_code="33137",
        rent_estimate=3100,
        bedrooms=1,
        bathrooms=1,
        square_footage=760,
        property_type="Apartment",
    ),
)
