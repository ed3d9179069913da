FERTILIZER_RECOMMENDATION_PROMPT = """You are an expert agricultural advisor specializing in soil health and crop nutrition.

A farmer needs a fertilizer recommendation based on the following information:
- Soil Type: {soil_type}
- Soil pH: {ph}
- Soil Temperature: {temperature}°C
- Crop: {crop}

Based on these factors, recommend a specific type of fertilizer (e.g., Urea, Balanced NPK 10-10-10, Superphosphate, Potash, Organic Compost, custom blend) and the application quantity in kilograms per hectare (kg/ha).

Provide a justification explaining why this specific fertilizer type and quantity are suitable considering the soil conditions and the nutritional needs of the specified crop. Focus on the primary nutrient needs addressed by the recommendation.
"""
