"""
app/data/minecraft_items.py

Bundled catalog of canonical Minecraft item names.

Order matters: fuzzy resolution walks this tuple front to back and the first
containment hit wins.
"""

from __future__ import annotations

MINECRAFT_ITEMS: tuple[str, ...] = (
    "Acacia Log",
    "Acacia Planks",
    "Activator Rail",
    "Amethyst Block",
    "Amethyst Shard",
    "Ancient Debris",
    "Andesite",
    "Anvil",
    "Apple",
    "Armor Stand",
    "Arrow",
    "Azalea",
    "Baked Potato",
    "Bamboo",
    "Barrel",
    "Basalt",
    "Beacon",
    "Bed",
    "Beef",
    "Beetroot",
    "Bell",
    "Birch Log",
    "Birch Planks",
    "Blackstone",
    "Blaze Powder",
    "Blaze Rod",
    "Blue Ice",
    "Bone",
    "Bone Block",
    "Bone Meal",
    "Book",
    "Bookshelf",
    "Bow",
    "Bowl",
    "Bread",
    "Brewing Stand",
    "Brick",
    "Bricks",
    "Bucket",
    "Cactus",
    "Cake",
    "Calcite",
    "Campfire",
    "Carpet",
    "Carrot",
    "Cauldron",
    "Chain",
    "Chest",
    "Chest Minecart",
    "Chicken",
    "Clay",
    "Clay Ball",
    "Coal",
    "Coal Block",
    "Cobbled Deepslate",
    "Cobblestone",
    "Cobblestone Slab",
    "Cobblestone Wall",
    "Cobweb",
    "Cocoa Beans",
    "Comparator",
    "Composter",
    "Cooked Beef",
    "Cooked Chicken",
    "Cooked Porkchop",
    "Copper Block",
    "Copper Ingot",
    "Crafting Table",
    "Crying Obsidian",
    "Daylight Detector",
    "Deepslate",
    "Detector Rail",
    "Diamond",
    "Diamond Block",
    "Diamond Pickaxe",
    "Diamond Sword",
    "Diorite",
    "Dirt",
    "Dispenser",
    "Dripstone Block",
    "Dropper",
    "Egg",
    "Emerald",
    "Emerald Block",
    "Enchanting Table",
    "End Portal Frame",
    "End Rod",
    "End Stone",
    "Ender Chest",
    "Ender Pearl",
    "Experience Bottle",
    "Feather",
    "Fence",
    "Fence Gate",
    "Fire Charge",
    "Fishing Rod",
    "Flint",
    "Flint and Steel",
    "Flower Pot",
    "Furnace",
    "Furnace Minecart",
    "Ghast Tear",
    "Glass",
    "Glass Bottle",
    "Glass Pane",
    "Glow Ink Sac",
    "Glow Lichen",
    "Glowstone",
    "Glowstone Dust",
    "Gold Block",
    "Gold Ingot",
    "Gold Nugget",
    "Golden Apple",
    "Golden Carrot",
    "Granite",
    "Grass Block",
    "Gravel",
    "Grindstone",
    "Gunpowder",
    "Hay Bale",
    "Heavy Weighted Pressure Plate",
    "Honey Block",
    "Honey Bottle",
    "Honeycomb",
    "Hopper",
    "Hopper Minecart",
    "Ice",
    "Ink Sac",
    "Iron Bars",
    "Iron Block",
    "Iron Door",
    "Iron Ingot",
    "Iron Nugget",
    "Iron Pickaxe",
    "Iron Trapdoor",
    "Item Frame",
    "Jack o'Lantern",
    "Jukebox",
    "Jungle Log",
    "Jungle Planks",
    "Kelp",
    "Ladder",
    "Lantern",
    "Lapis Block",
    "Lapis Lazuli",
    "Lava Bucket",
    "Lead",
    "Leather",
    "Lectern",
    "Lever",
    "Light Weighted Pressure Plate",
    "Lightning Rod",
    "Lily Pad",
    "Lodestone",
    "Loom",
    "Magma Block",
    "Magma Cream",
    "Melon",
    "Melon Slice",
    "Minecart",
    "Moss Block",
    "Mossy Cobblestone",
    "Mud",
    "Mushroom Stem",
    "Mutton",
    "Name Tag",
    "Nether Brick",
    "Nether Bricks",
    "Nether Quartz",
    "Nether Star",
    "Nether Wart",
    "Netherite Ingot",
    "Netherite Scrap",
    "Netherrack",
    "Note Block",
    "Oak Button",
    "Oak Door",
    "Oak Fence",
    "Oak Leaves",
    "Oak Log",
    "Oak Planks",
    "Oak Pressure Plate",
    "Oak Sign",
    "Oak Slab",
    "Oak Stairs",
    "Oak Trapdoor",
    "Observer",
    "Obsidian",
    "Packed Ice",
    "Painting",
    "Paper",
    "Phantom Membrane",
    "Piston",
    "Podzol",
    "Pointed Dripstone",
    "Poisonous Potato",
    "Porkchop",
    "Potato",
    "Powder Snow Bucket",
    "Powered Rail",
    "Prismarine",
    "Prismarine Crystals",
    "Prismarine Shard",
    "Pumpkin",
    "Purpur Block",
    "Quartz Block",
    "Rabbit Hide",
    "Rail",
    "Raw Copper",
    "Raw Gold",
    "Raw Iron",
    "Redstone Block",
    "Redstone Dust",
    "Redstone Lamp",
    "Redstone Repeater",
    "Redstone Torch",
    "Respawn Anchor",
    "Rotten Flesh",
    "Saddle",
    "Sand",
    "Sandstone",
    "Scaffolding",
    "Sculk Sensor",
    "Sea Lantern",
    "Sea Pickle",
    "Shears",
    "Shield",
    "Shroomlight",
    "Shulker Box",
    "Shulker Shell",
    "Slime Ball",
    "Slime Block",
    "Smithing Table",
    "Smoker",
    "Smooth Stone",
    "Smooth Stone Slab",
    "Snow Block",
    "Snowball",
    "Soul Campfire",
    "Soul Sand",
    "Soul Soil",
    "Soul Torch",
    "Spider Eye",
    "Sponge",
    "Spruce Log",
    "Spruce Planks",
    "Spruce Trapdoor",
    "Stick",
    "Sticky Piston",
    "Stone",
    "Stone Bricks",
    "Stone Button",
    "Stone Pressure Plate",
    "Stone Slab",
    "Stonecutter",
    "String",
    "Sugar",
    "Sugar Cane",
    "Sweet Berries",
    "Target",
    "Terracotta",
    "Tinted Glass",
    "TNT",
    "TNT Minecart",
    "Torch",
    "Totem of Undying",
    "Trapped Chest",
    "Trident",
    "Tripwire Hook",
    "Tuff",
    "Turtle Egg",
    "Twisting Vines",
    "Villager",
    "Vines",
    "Warped Planks",
    "Water Bucket",
    "Weeping Vines",
    "Wheat",
    "Wheat Seeds",
    "White Wool",
    "Wither Rose",
    "Wither Skeleton Skull",
    "Wool",
    "Zombie Spawn Egg",
)
